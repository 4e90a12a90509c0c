from fastapi import Depends, Header
from sqlalchemy.orm import Session

from storefront.database.db_connection import get_db
from storefront.api.cart.contracts.cart_contract import ICartContract
from storefront.api.cart.adapters.cart_adapter import CartAdapter
from storefront.api.localization.models.model_locale import LocaleModel
from storefront.api.localization.repositories.repo_locale import get_locale


def get_cart_contract(
    x_cart_token: str = Header(..., alias="X-Cart-Token"),
    db: Session = Depends(get_db),
    locale: LocaleModel = Depends(get_locale),
) -> ICartContract:
    return CartAdapter(db, x_cart_token, locale.currency)
