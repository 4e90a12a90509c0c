from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session
from starlette import status

from storefront.api.cart.contracts.cart_contract import (
    ICartContract,
    CartItemDTO,
    CartRuleDiscount,
    CartStatistics,
)
from storefront.api.cart.models.model_cart import CartModel
from storefront.api.cart.repositories.repo_cart import CartRepository
from storefront.utils.database_utils import now_trimmed
from storefront.utils.logger import logger

CENT = Decimal("0.01")


def _money(value) -> Decimal:
    return Decimal(str(value or 0)).quantize(CENT, rounding=ROUND_HALF_UP)


class CartAdapter(ICartContract):
    """Cart contract backed by the `carts` tables."""

    def __init__(self, db: Session, token: str, currency):
        self.db = db
        self.repo = CartRepository(db)
        self.token = token
        self.currency = currency
        self.statistics: Optional[CartStatistics] = None
        self._cart: Optional[CartModel] = None

    # ---------------- Loading ----------------
    def init(self, save: bool = False) -> CartModel:
        if self._cart is None:
            cart = self.repo.get_by_token(self.token)
            if not cart:
                raise HTTPException(status.HTTP_404_NOT_FOUND, "Cart not found")
            self._cart = cart
        if save:
            self._cart.updated_at = now_trimmed()
            self.repo.flush()
        return self._cart

    @property
    def customer(self):
        return self.init().customer

    def get_items(self) -> List[CartItemDTO]:
        cart = self.init()
        items = []
        for it in cart.items:
            price = it.variant.get_price(self.currency) if it.variant is not None else None
            items.append(
                CartItemDTO(
                    product=it.product,
                    variant=it.variant,
                    quantity=it.quantity,
                    surface_finish=it.surface_finish,
                    cloth=it.cloth,
                    glass=it.glass,
                    weight_category=it.weight_category,
                    is_gift=bool(it.is_gift),
                    prices={self.currency.code: _money(price)} if price is not None else {},
                )
            )
        return items

    # ---------------- Statistics ----------------
    def calculate_statistics(self, save: bool = False) -> CartStatistics:
        cart = self.init()

        products_price = Decimal("0")
        for item in self.get_items():
            if item.is_gift:
                continue
            try:
                products_price += item.get_price(self.currency) * item.quantity
            except ValueError as e:
                raise HTTPException(status.HTTP_400_BAD_REQUEST, str(e))

        rules: list[CartRuleDiscount] = []
        total_discount = Decimal("0")
        for rule in list(cart.rules):
            if not rule.active or rule.is_exhausted():
                logger.info(f"[Cart] rule {rule.code} no longer applicable cart_id={cart.id}")
                if save:
                    cart.rules.remove(rule)
                continue
            discount = _money(rule.discount_for(products_price - total_discount))
            total_discount += discount
            rules.append(CartRuleDiscount(rule=rule, discount=discount))

        dm = cart.delivery_method
        delivery_price = _money(dm.price) if dm else Decimal("0.00")
        assembly_price = _money(dm.assembly_price) if dm else Decimal("0.00")
        full_delivery_price = _money(dm.full_delivery_price) if dm else Decimal("0.00")

        total_price = products_price - total_discount + delivery_price
        if cart.assembly:
            total_price += assembly_price
        if cart.full_delivery:
            total_price += full_delivery_price
        total_price = max(_money(total_price), Decimal("0.00"))

        pm = cart.payment_method
        deposit = Decimal("0.00")
        if pm is not None and pm.requires_deposit():
            deposit = _money(total_price * Decimal(str(pm.deposit_percent)) / Decimal("100"))

        self.statistics = CartStatistics(
            products_price=_money(products_price),
            total_discount=_money(total_discount),
            delivery_price=delivery_price,
            assembly_price=assembly_price,
            full_delivery_price=full_delivery_price,
            total_price=total_price,
            deposit=deposit,
            rules=rules,
        )

        if save:
            self.repo.flush()
        return self.statistics
