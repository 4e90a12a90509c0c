from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from storefront.database.db_connection import Base
from storefront.database.translations import TranslationMixin
from storefront.utils.database_utils import now_trimmed


class CategoryModel(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    parent_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)

    translations = relationship(
        "CategoryTranslationModel",
        back_populates="category",
        cascade="all, delete-orphan",
    )


class CategoryTranslationModel(TranslationMixin, Base):
    __tablename__ = "category_translations"
    __table_args__ = (
        UniqueConstraint("category_id", "locale_id", name="uq_category_translation"),
    )

    category_id = Column(Integer, ForeignKey("categories.id", ondelete="CASCADE"), nullable=False)
    category = relationship("CategoryModel", back_populates="translations")
    slug = Column(String(255), nullable=True)


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(50), nullable=True)
    removed = Column(Boolean, nullable=False, default=False)

    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    category = relationship("CategoryModel", lazy="select")

    variants = relationship("VariantModel", back_populates="product", cascade="all, delete-orphan")
    translations = relationship(
        "ProductTranslationModel",
        back_populates="product",
        cascade="all, delete-orphan",
    )

    created_at = Column(DateTime(timezone=True), default=now_trimmed, nullable=False)


class ProductTranslationModel(TranslationMixin, Base):
    __tablename__ = "product_translations"
    __table_args__ = (
        UniqueConstraint("product_id", "locale_id", name="uq_product_translation"),
    )

    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    product = relationship("ProductModel", back_populates="translations")
    slug = Column(String(255), nullable=True)
    description = Column(String(2000), nullable=True)
