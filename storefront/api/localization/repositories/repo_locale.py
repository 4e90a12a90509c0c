from typing import Optional

from fastapi import Depends, HTTPException, Path
from sqlalchemy.orm import Session
from starlette import status

from storefront.api.localization.models.model_locale import LocaleModel
from storefront.database.db_connection import get_db


class LocaleRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_icu(self, icu: str) -> Optional[LocaleModel]:
        return self.db.query(LocaleModel).filter(LocaleModel.icu == icu).first()


def get_locale(
    locale: str = Path(..., description="Locale ICU code, ex.: cs_CZ"),
    db: Session = Depends(get_db),
) -> LocaleModel:
    found = LocaleRepository(db).get_by_icu(locale)
    if not found:
        raise HTTPException(status.HTTP_404_NOT_FOUND, f"Locale '{locale}' not found")
    return found
