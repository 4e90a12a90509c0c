from decimal import Decimal

from sqlalchemy import Column, Integer, String, Boolean, Numeric, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from storefront.database.db_connection import Base
from storefront.database.translations import TranslationMixin


# ----------------------
# DELIVERY METHOD
# ----------------------
class DeliveryMethodModel(Base):
    __tablename__ = "delivery_methods"

    PERSONAL_PICKUP = "personal_pickup"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(50), nullable=False, unique=True)
    active = Column(Boolean, nullable=False, default=True)

    price = Column(Numeric(18, 2), nullable=False, default=0)
    assembly_price = Column(Numeric(18, 2), nullable=False, default=0)
    full_delivery_price = Column(Numeric(18, 2), nullable=False, default=0)

    translations = relationship(
        "DeliveryMethodTranslationModel",
        back_populates="delivery_method",
        cascade="all, delete-orphan",
    )

    def is_personal_pickup(self) -> bool:
        return self.code == self.PERSONAL_PICKUP


class DeliveryMethodTranslationModel(TranslationMixin, Base):
    __tablename__ = "delivery_method_translations"
    __table_args__ = (
        UniqueConstraint("delivery_method_id", "locale_id", name="uq_delivery_method_translation"),
    )

    delivery_method_id = Column(Integer, ForeignKey("delivery_methods.id", ondelete="CASCADE"), nullable=False)
    delivery_method = relationship("DeliveryMethodModel", back_populates="translations")


# ----------------------
# PAYMENT METHOD
# ----------------------
class PaymentMethodModel(Base):
    __tablename__ = "payment_methods"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(50), nullable=False, unique=True)
    active = Column(Boolean, nullable=False, default=True)

    # Paid through the card gateway right after placing the order
    online = Column(Boolean, nullable=False, default=False)
    # Share of the total collected up front, in percent; NULL/0 = no deposit
    deposit_percent = Column(Numeric(5, 2), nullable=True)

    translations = relationship(
        "PaymentMethodTranslationModel",
        back_populates="payment_method",
        cascade="all, delete-orphan",
    )

    def requires_deposit(self) -> bool:
        return bool(self.deposit_percent) and Decimal(str(self.deposit_percent)) > 0


class PaymentMethodTranslationModel(TranslationMixin, Base):
    __tablename__ = "payment_method_translations"
    __table_args__ = (
        UniqueConstraint("payment_method_id", "locale_id", name="uq_payment_method_translation"),
    )

    payment_method_id = Column(Integer, ForeignKey("payment_methods.id", ondelete="CASCADE"), nullable=False)
    payment_method = relationship("PaymentMethodModel", back_populates="translations")
