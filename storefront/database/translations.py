from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import declared_attr, relationship


class TranslationMixin:
    """
    Columns shared by every `*_translations` table.

    The owner foreign key is declared by each concrete class; this mixin
    adds the locale link and the translated name.
    """

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)

    @declared_attr
    def locale_id(cls):
        return Column(Integer, ForeignKey("locales.id", ondelete="CASCADE"), nullable=False)

    @declared_attr
    def locale(cls):
        return relationship("LocaleModel", lazy="select")


def translated_name(translations, locale_id: int | None = None) -> str | None:
    """Name from an already-loaded translation collection."""
    for t in translations or []:
        if locale_id is None or t.locale_id == locale_id:
            return t.name
    return None
