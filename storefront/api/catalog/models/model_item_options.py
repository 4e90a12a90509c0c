"""
Catalogue lookups a variant or an ordered item points at: stock availability
and the configurable options (surface finish, cloth, glass, weight category).
Every lookup is translatable.
"""
from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from storefront.database.db_connection import Base
from storefront.database.translations import TranslationMixin


class AvailabilityModel(Base):
    __tablename__ = "availabilities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(50), nullable=False, unique=True)
    delivery_days = Column(Integer, nullable=True)

    translations = relationship(
        "AvailabilityTranslationModel",
        back_populates="availability",
        cascade="all, delete-orphan",
    )


class AvailabilityTranslationModel(TranslationMixin, Base):
    __tablename__ = "availability_translations"
    __table_args__ = (
        UniqueConstraint("availability_id", "locale_id", name="uq_availability_translation"),
    )

    availability_id = Column(Integer, ForeignKey("availabilities.id", ondelete="CASCADE"), nullable=False)
    availability = relationship("AvailabilityModel", back_populates="translations")


class SurfaceFinishModel(Base):
    __tablename__ = "surface_finishes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(50), nullable=False, unique=True)

    translations = relationship(
        "SurfaceFinishTranslationModel",
        back_populates="surface_finish",
        cascade="all, delete-orphan",
    )


class SurfaceFinishTranslationModel(TranslationMixin, Base):
    __tablename__ = "surface_finish_translations"
    __table_args__ = (
        UniqueConstraint("surface_finish_id", "locale_id", name="uq_surface_finish_translation"),
    )

    surface_finish_id = Column(Integer, ForeignKey("surface_finishes.id", ondelete="CASCADE"), nullable=False)
    surface_finish = relationship("SurfaceFinishModel", back_populates="translations")


class ClothModel(Base):
    __tablename__ = "cloths"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(50), nullable=False, unique=True)

    translations = relationship(
        "ClothTranslationModel",
        back_populates="cloth",
        cascade="all, delete-orphan",
    )


class ClothTranslationModel(TranslationMixin, Base):
    __tablename__ = "cloth_translations"
    __table_args__ = (
        UniqueConstraint("cloth_id", "locale_id", name="uq_cloth_translation"),
    )

    cloth_id = Column(Integer, ForeignKey("cloths.id", ondelete="CASCADE"), nullable=False)
    cloth = relationship("ClothModel", back_populates="translations")


class GlassModel(Base):
    __tablename__ = "glasses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(50), nullable=False, unique=True)

    translations = relationship(
        "GlassTranslationModel",
        back_populates="glass",
        cascade="all, delete-orphan",
    )


class GlassTranslationModel(TranslationMixin, Base):
    __tablename__ = "glass_translations"
    __table_args__ = (
        UniqueConstraint("glass_id", "locale_id", name="uq_glass_translation"),
    )

    glass_id = Column(Integer, ForeignKey("glasses.id", ondelete="CASCADE"), nullable=False)
    glass = relationship("GlassModel", back_populates="translations")


class WeightCategoryModel(Base):
    __tablename__ = "weight_categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(50), nullable=False, unique=True)

    translations = relationship(
        "WeightCategoryTranslationModel",
        back_populates="weight_category",
        cascade="all, delete-orphan",
    )


class WeightCategoryTranslationModel(TranslationMixin, Base):
    __tablename__ = "weight_category_translations"
    __table_args__ = (
        UniqueConstraint("weight_category_id", "locale_id", name="uq_weight_category_translation"),
    )

    weight_category_id = Column(Integer, ForeignKey("weight_categories.id", ondelete="CASCADE"), nullable=False)
    weight_category = relationship("WeightCategoryModel", back_populates="translations")
