from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from storefront.database.db_connection import Base
from storefront.database.translations import TranslationMixin


class OrderStatusModel(Base):
    """Workflow state of an order, managed from the back office."""
    __tablename__ = "order_statuses"

    NEW = "new"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(50), nullable=False, unique=True)
    color = Column(String(20), nullable=True)
    is_default = Column(Boolean, nullable=False, default=False)

    translations = relationship(
        "OrderStatusTranslationModel",
        back_populates="status",
        cascade="all, delete-orphan",
    )


class OrderStatusTranslationModel(TranslationMixin, Base):
    __tablename__ = "order_status_translations"
    __table_args__ = (
        UniqueConstraint("status_id", "locale_id", name="uq_order_status_translation"),
    )

    status_id = Column(Integer, ForeignKey("order_statuses.id", ondelete="CASCADE"), nullable=False)
    status = relationship("OrderStatusModel", back_populates="translations")
