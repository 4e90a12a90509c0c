# storefront/api/localization/models/model_locale.py
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from storefront.database.db_connection import Base


class CurrencyModel(Base):
    __tablename__ = "currencies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(3), nullable=False, unique=True)  # ISO 4217 alpha, ex.: CZK
    gpwebpay_code = Column(Integer, nullable=False)  # ISO 4217 numeric, ex.: 203
    symbol = Column(String(8), nullable=True)

    def get_gpwebpay_identifier(self) -> int:
        """Numeric currency code expected by GP WebPay."""
        return int(self.gpwebpay_code)


class LocaleModel(Base):
    __tablename__ = "locales"

    id = Column(Integer, primary_key=True, autoincrement=True)
    icu = Column(String(10), nullable=False, unique=True)  # ex.: cs_CZ
    language = Column(String(5), nullable=False)

    currency_id = Column(Integer, ForeignKey("currencies.id", ondelete="RESTRICT"), nullable=False)
    currency = relationship("CurrencyModel", lazy="joined")
