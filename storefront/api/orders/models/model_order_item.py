from decimal import Decimal

from sqlalchemy import Column, Integer, Boolean, Numeric, ForeignKey, Index
from sqlalchemy.orm import relationship

from storefront.database.db_connection import Base


class OrderItemModel(Base):
    __tablename__ = "order_items"
    __table_args__ = (
        Index("idx_order_items_order", "order_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)

    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    order = relationship("OrderModel", back_populates="items")

    product_id = Column(Integer, ForeignKey("products.id", ondelete="RESTRICT"), nullable=False)
    product = relationship("ProductModel", lazy="select")
    variant_id = Column(Integer, ForeignKey("variants.id", ondelete="RESTRICT"), nullable=False)
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

    single_price = Column(Numeric(18, 2), nullable=False, default=0)
    total_price = Column(Numeric(18, 2), nullable=False, default=0)

    def calculate_total_price(self) -> Decimal:
        if self.single_price is None or self.quantity is None:
            return Decimal("0")
        return Decimal(str(self.single_price)) * Decimal(str(self.quantity))
