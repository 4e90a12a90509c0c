from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from storefront.database.db_connection import Base
from storefront.database.translations import TranslationMixin


class ParameterModel(Base):
    __tablename__ = "parameters"

    id = Column(Integer, primary_key=True, autoincrement=True)
    position = Column(Integer, nullable=False, default=0)

    values = relationship("ParameterValueModel", back_populates="parameter", cascade="all, delete-orphan")
    translations = relationship(
        "ParameterTranslationModel",
        back_populates="parameter",
        cascade="all, delete-orphan",
    )


class ParameterTranslationModel(TranslationMixin, Base):
    __tablename__ = "parameter_translations"
    __table_args__ = (
        UniqueConstraint("parameter_id", "locale_id", name="uq_parameter_translation"),
    )

    parameter_id = Column(Integer, ForeignKey("parameters.id", ondelete="CASCADE"), nullable=False)
    parameter = relationship("ParameterModel", back_populates="translations")


class ParameterValueModel(Base):
    __tablename__ = "parameter_values"

    id = Column(Integer, primary_key=True, autoincrement=True)
    parameter_id = Column(Integer, ForeignKey("parameters.id", ondelete="CASCADE"), nullable=False)
    parameter = relationship("ParameterModel", back_populates="values")

    translations = relationship(
        "ParameterValueTranslationModel",
        back_populates="value",
        cascade="all, delete-orphan",
    )


class ParameterValueTranslationModel(TranslationMixin, Base):
    __tablename__ = "parameter_value_translations"
    __table_args__ = (
        UniqueConstraint("value_id", "locale_id", name="uq_parameter_value_translation"),
    )

    value_id = Column(Integer, ForeignKey("parameter_values.id", ondelete="CASCADE"), nullable=False)
    value = relationship("ParameterValueModel", back_populates="translations")
