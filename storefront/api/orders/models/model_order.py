# storefront/api/orders/models/model_order.py
import secrets
from decimal import Decimal
from typing import Optional

from sqlalchemy import (
    Column, Integer, String, DateTime, ForeignKey, Numeric, Boolean, Index, UniqueConstraint
)
from sqlalchemy.orm import relationship

from storefront.database.db_connection import Base
from storefront.utils.database_utils import now_trimmed


# Fields copied verbatim from the cart when the order is placed
CONTACT_FIELDS = ("email", "phone", "first_name", "last_name")
BILLING_ADDRESS_FIELDS = ("company", "company_id", "vat_id", "street", "city", "zip", "country")
DELIVERY_ADDRESS_FIELDS = (
    "delivery_first_name",
    "delivery_last_name",
    "delivery_company",
    "delivery_phone",
    "delivery_street",
    "delivery_city",
    "delivery_zip",
    "delivery_country",
)


class OrderModel(Base):
    """
    Placed order.

    Prices are snapshots taken from the cart statistics at placement time and
    are never recalculated from the catalogue afterwards.
    """
    __tablename__ = "orders"
    __table_args__ = (
        UniqueConstraint("index", name="uq_orders_index"),
        Index("idx_orders_created_at", "created_at"),
        Index("idx_orders_customer", "customer_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Human readable number: yymm + 3-digit monthly sequence, ex.: 2610007
    index = Column(String(20), nullable=False)
    # Secret part of the public order links
    hash = Column(String(64), nullable=False)

    locale_id = Column(Integer, ForeignKey("locales.id", ondelete="RESTRICT"), nullable=False)
    locale = relationship("LocaleModel", lazy="joined")

    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="SET NULL"), nullable=True)
    customer = relationship("CustomerModel", lazy="select")

    status_id = Column(Integer, ForeignKey("order_statuses.id", ondelete="SET NULL"), nullable=True)
    status = relationship("OrderStatusModel", lazy="select")

    delivery_method_id = Column(Integer, ForeignKey("delivery_methods.id", ondelete="RESTRICT"), nullable=True)
    delivery_method = relationship("DeliveryMethodModel", lazy="select")

    payment_method_id = Column(Integer, ForeignKey("payment_methods.id", ondelete="RESTRICT"), nullable=True)
    payment_method = relationship("PaymentMethodModel", lazy="select")

    # Contact
    email = Column(String(255), nullable=True)
    phone = Column(String(30), nullable=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)

    # Billing address
    company = Column(String(255), nullable=True)
    company_id = Column(String(20), nullable=True)
    vat_id = Column(String(20), nullable=True)
    street = Column(String(255), nullable=True)
    city = Column(String(100), nullable=True)
    zip = Column(String(20), nullable=True)
    country = Column(String(2), nullable=True)

    # Delivery address
    delivery_first_name = Column(String(100), nullable=True)
    delivery_last_name = Column(String(100), nullable=True)
    delivery_company = Column(String(255), nullable=True)
    delivery_phone = Column(String(30), nullable=True)
    delivery_street = Column(String(255), nullable=True)
    delivery_city = Column(String(100), nullable=True)
    delivery_zip = Column(String(20), nullable=True)
    delivery_country = Column(String(2), nullable=True)

    note = Column(String(1000), nullable=True)
    assembly = Column(Boolean, nullable=False, default=False)
    full_delivery = Column(Boolean, nullable=False, default=False)

    # Price snapshot
    products_price = Column(Numeric(18, 2), nullable=False, default=0)
    total_discount = Column(Numeric(18, 2), nullable=False, default=0)
    delivery_price = Column(Numeric(18, 2), nullable=False, default=0)
    assembly_price = Column(Numeric(18, 2), nullable=False, default=0)
    full_delivery_price = Column(Numeric(18, 2), nullable=False, default=0)
    total_delivery_price = Column(Numeric(18, 2), nullable=False, default=0)
    total_price = Column(Numeric(18, 2), nullable=False, default=0)
    deposit = Column(Numeric(18, 2), nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), default=now_trimmed, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=now_trimmed, onupdate=now_trimmed, nullable=False)

    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.id",
    )
    vouchers = relationship("OrderVoucherModel", back_populates="order", cascade="all, delete-orphan")

    # ---- Hydration from the cart ----
    def generate_secure_hash(self) -> str:
        self.hash = secrets.token_hex(16)
        return self.hash

    def has_hash(self, candidate: Optional[str]) -> bool:
        # compare_digest rejects non-ASCII str, bytes are always comparable
        return secrets.compare_digest(self.hash.encode(), (candidate or "").encode())

    def hydrate_from_cart(self, cart) -> None:
        """Contact data, note and delivery options."""
        for field in CONTACT_FIELDS:
            setattr(self, field, getattr(cart, field, None))
        self.note = cart.note
        self.assembly = bool(cart.assembly)
        self.full_delivery = bool(cart.full_delivery)

    def hydrate_address_from_cart(self, cart) -> None:
        for field in BILLING_ADDRESS_FIELDS:
            setattr(self, field, getattr(cart, field, None))

    def hydrate_delivery_address_from_cart(self, cart) -> None:
        for field in DELIVERY_ADDRESS_FIELDS:
            setattr(self, field, getattr(cart, field, None))

    # ---- Computed ----
    @property
    def amount_to_pay(self) -> Decimal:
        """Amount charged online: the deposit when one is required, the total otherwise."""
        deposit = Decimal(str(self.deposit or 0))
        return deposit if deposit else Decimal(str(self.total_price or 0))

    def has_delivery_address(self) -> bool:
        return bool(self.delivery_street)
