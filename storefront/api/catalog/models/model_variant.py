from decimal import Decimal
from typing import Optional

from sqlalchemy import Column, Integer, String, Boolean, Numeric, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from storefront.database.db_connection import Base


class VariantModel(Base):
    __tablename__ = "variants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    product = relationship("ProductModel", back_populates="variants")

    code = Column(String(50), nullable=True)
    removed = Column(Boolean, nullable=False, default=False)

    availability_id = Column(Integer, ForeignKey("availabilities.id", ondelete="SET NULL"), nullable=True)
    availability = relationship("AvailabilityModel", lazy="select")

    prices = relationship("VariantPriceModel", back_populates="variant", cascade="all, delete-orphan")
    images = relationship(
        "VariantImageModel",
        back_populates="variant",
        cascade="all, delete-orphan",
        order_by="VariantImageModel.position",
    )
    parameters = relationship("VariantParameterModel", back_populates="variant", cascade="all, delete-orphan")

    def get_price(self, currency) -> Optional[Decimal]:
        """Unit price in the given currency (model or currency id)."""
        currency_id = getattr(currency, "id", currency)
        for price in self.prices:
            if price.currency_id == currency_id:
                return Decimal(str(price.price))
        return None


class VariantPriceModel(Base):
    __tablename__ = "variant_prices"
    __table_args__ = (
        UniqueConstraint("variant_id", "currency_id", name="uq_variant_price_currency"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    variant_id = Column(Integer, ForeignKey("variants.id", ondelete="CASCADE"), nullable=False)
    variant = relationship("VariantModel", back_populates="prices")
    currency_id = Column(Integer, ForeignKey("currencies.id", ondelete="RESTRICT"), nullable=False)
    currency = relationship("CurrencyModel", lazy="select")
    price = Column(Numeric(18, 2), nullable=False)


class ImageModel(Base):
    __tablename__ = "images"

    id = Column(Integer, primary_key=True, autoincrement=True)
    path = Column(String(500), nullable=False)
    alt = Column(String(255), nullable=True)


class VariantImageModel(Base):
    __tablename__ = "variant_images"

    id = Column(Integer, primary_key=True, autoincrement=True)
    variant_id = Column(Integer, ForeignKey("variants.id", ondelete="CASCADE"), nullable=False)
    variant = relationship("VariantModel", back_populates="images")
    image_id = Column(Integer, ForeignKey("images.id", ondelete="CASCADE"), nullable=False)
    image = relationship("ImageModel", lazy="select")
    position = Column(Integer, nullable=False, default=0)


class VariantParameterModel(Base):
    __tablename__ = "variant_parameters"

    id = Column(Integer, primary_key=True, autoincrement=True)
    variant_id = Column(Integer, ForeignKey("variants.id", ondelete="CASCADE"), nullable=False)
    variant = relationship("VariantModel", back_populates="parameters")
    parameter_id = Column(Integer, ForeignKey("parameters.id", ondelete="CASCADE"), nullable=False)
    parameter = relationship("ParameterModel", lazy="select")
    value_id = Column(Integer, ForeignKey("parameter_values.id", ondelete="CASCADE"), nullable=False)
    value = relationship("ParameterValueModel", lazy="select")
