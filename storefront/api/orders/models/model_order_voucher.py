from sqlalchemy import Column, Integer, Numeric, ForeignKey
from sqlalchemy.orm import relationship

from storefront.database.db_connection import Base


class OrderVoucherModel(Base):
    """Cart rule applied to an order together with the discount it granted."""
    __tablename__ = "order_vouchers"

    id = Column(Integer, primary_key=True, autoincrement=True)

    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    order = relationship("OrderModel", back_populates="vouchers")

    cart_rule_id = Column(Integer, ForeignKey("cart_rules.id", ondelete="RESTRICT"), nullable=False)
    cart_rule = relationship("CartRuleModel", lazy="select")

    discount = Column(Numeric(18, 2), nullable=False, default=0)
