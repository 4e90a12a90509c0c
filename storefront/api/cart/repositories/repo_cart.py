from typing import Optional

from sqlalchemy.orm import Session, joinedload, selectinload

from storefront.api.cart.models.model_cart import CartModel, CartItemModel
from storefront.api.catalog.models.model_variant import VariantModel


class CartRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_token(self, token: str) -> Optional[CartModel]:
        return (
            self.db.query(CartModel)
            .options(
                joinedload(CartModel.customer),
                joinedload(CartModel.delivery_method),
                joinedload(CartModel.payment_method),
                selectinload(CartModel.rules),
                selectinload(CartModel.items)
                .joinedload(CartItemModel.variant)
                .selectinload(VariantModel.prices),
                selectinload(CartModel.items).joinedload(CartItemModel.product),
            )
            .filter(CartModel.token == token)
            .first()
        )

    def flush(self):
        self.db.flush()
