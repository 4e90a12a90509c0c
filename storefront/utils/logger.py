# storefront/utils/logger.py

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
# Empty LOG_DIR disables the file handler (tests, containers)
LOG_DIR = os.getenv("LOG_DIR", str(Path(__file__).resolve().parent.parent / "logs"))

logger = logging.getLogger("storefront")
logger.setLevel(LOG_LEVEL)

# Avoid duplicated handlers on repeated imports
if not logger.handlers:
    formatter = logging.Formatter("[%(asctime)s] [%(levelname)s] %(name)s: %(message)s")

    if LOG_DIR:
        Path(LOG_DIR).mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=Path(LOG_DIR) / "storefront.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
