import os
from dotenv import load_dotenv
from pathlib import Path

# Load .env manually when running outside Docker
if not os.getenv("RUNNING_IN_DOCKER"):
    dotenv_path = Path(__file__).resolve().parents[2] / ".env"
    load_dotenv(dotenv_path=dotenv_path)

# Database
DB_CONFIG = {
    'database': os.getenv('DB_NAME'),
    'user': os.getenv('DB_USER'),
    'password': os.getenv('DB_PASSWORD'),
    'host': os.getenv('DB_HOST'),
    'port': int(os.getenv('DB_PORT', 5432)),
}

# Full URL wins over DB_CONFIG (used by tests and local sqlite runs)
DATABASE_URL = os.getenv("DATABASE_URL")

# Database SSL (optional)
DB_SSL_MODE = os.getenv('DB_SSL_MODE')  # e.g. require, verify-ca, verify-full

# Shop
TIMEZONE = os.getenv("TIMEZONE", "Europe/Prague")

# CORS
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
CORS_ALLOW_ALL = os.getenv("CORS_ALLOW_ALL", "false").lower() in ("1", "true", "yes")

# FastAPI / App
BASE_URL = os.getenv("BASE_URL", "http://localhost:8000")
ENABLE_DOCS = os.getenv("ENABLE_DOCS", "true").lower() in ("1", "true", "yes")

# GP WebPay
GPWEBPAY_MERCHANT_NUMBER = os.getenv("GPWEBPAY_MERCHANT_NUMBER", "")
GPWEBPAY_URL = os.getenv("GPWEBPAY_URL", "https://test.3dsecure.gpwebpay.com/pgw/order.do")
GPWEBPAY_DEPOSIT_FLAG = int(os.getenv("GPWEBPAY_DEPOSIT_FLAG", 1))
