# storefront/api/cart/models/model_cart.py
from sqlalchemy import (
    Column, Integer, String, Boolean, DateTime, ForeignKey, Table, CheckConstraint
)
from sqlalchemy.orm import relationship

from storefront.database.db_connection import Base
from storefront.utils.database_utils import now_trimmed

# Cart <-> applied cart rules
cart_rule_association = Table(
    "cart_applied_rules",
    Base.metadata,
    Column("cart_id", Integer, ForeignKey("carts.id", ondelete="CASCADE"), primary_key=True),
    Column("cart_rule_id", Integer, ForeignKey("cart_rules.id", ondelete="CASCADE"), primary_key=True),
)


class CartModel(Base):
    """Persisted checkout state of a visitor: items, contact data and choices."""
    __tablename__ = "carts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    token = Column(String(64), nullable=False, unique=True)

    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="SET NULL"), nullable=True)
    customer = relationship("CustomerModel", lazy="select")

    delivery_method_id = Column(Integer, ForeignKey("delivery_methods.id", ondelete="SET NULL"), nullable=True)
    delivery_method = relationship("DeliveryMethodModel", lazy="select")

    payment_method_id = Column(Integer, ForeignKey("payment_methods.id", ondelete="SET NULL"), nullable=True)
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

    # Delivery address (only when different from billing)
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

    created_at = Column(DateTime(timezone=True), default=now_trimmed, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=now_trimmed, onupdate=now_trimmed, nullable=False)

    items = relationship(
        "CartItemModel",
        back_populates="cart",
        cascade="all, delete-orphan",
        order_by="CartItemModel.id",
    )
    rules = relationship("CartRuleModel", secondary=cart_rule_association, lazy="select")

    def has_delivery_address(self) -> bool:
        return bool(self.delivery_street and self.delivery_city)


class CartItemModel(Base):
    __tablename__ = "cart_items"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_cart_items_quantity_positive"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    cart_id = Column(Integer, ForeignKey("carts.id", ondelete="CASCADE"), nullable=False)
    cart = relationship("CartModel", back_populates="items")

    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    product = relationship("ProductModel", lazy="select")
    variant_id = Column(Integer, ForeignKey("variants.id", ondelete="CASCADE"), nullable=False)
    variant = relationship("VariantModel", lazy="select")

    quantity = Column(Integer, nullable=False, default=1)

    surface_finish_id = Column(Integer, ForeignKey("surface_finishes.id", ondelete="SET NULL"), nullable=True)
    surface_finish = relationship("SurfaceFinishModel", lazy="select")
    cloth_id = Column(Integer, ForeignKey("cloths.id", ondelete="SET NULL"), nullable=True)
    cloth = relationship("ClothModel", lazy="select")
    glass_id = Column(Integer, ForeignKey("glasses.id", ondelete="SET NULL"), nullable=True)
    glass = relationship("GlassModel", lazy="select")
    weight_category_id = Column(Integer, ForeignKey("weight_categories.id", ondelete="SET NULL"), nullable=True)
    weight_category = relationship("WeightCategoryModel", lazy="select")

    is_gift = Column(Boolean, nullable=False, default=False)
