from sqlalchemy import Column, Integer, String, DateTime
from storefront.database.db_connection import Base
from storefront.utils.database_utils import now_trimmed


class CustomerModel(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    phone = Column(String(30), nullable=True)

    # Default billing address
    company = Column(String(255), nullable=True)
    company_id = Column(String(20), nullable=True)
    vat_id = Column(String(20), nullable=True)
    street = Column(String(255), nullable=True)
    city = Column(String(100), nullable=True)
    zip = Column(String(20), nullable=True)
    country = Column(String(2), nullable=True)

    created_at = Column(DateTime(timezone=True), default=now_trimmed, nullable=False)
