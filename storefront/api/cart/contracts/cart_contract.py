"""
Contract (interface) of the cart as seen by order placement.

The cart computes its own prices; order placement only reads the finished
statistics snapshot and the item list, so any implementation of this
contract can feed `OrderService.place_order`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional


@dataclass(slots=True)
class CartRuleDiscount:
    """Cart rule applied to the cart and the discount it grants."""

    rule: Any  # CartRuleModel
    discount: Decimal


@dataclass(slots=True)
class CartStatistics:
    products_price: Decimal = Decimal("0")
    total_discount: Decimal = Decimal("0")
    delivery_price: Decimal = Decimal("0")
    assembly_price: Decimal = Decimal("0")
    full_delivery_price: Decimal = Decimal("0")
    total_price: Decimal = Decimal("0")
    deposit: Decimal = Decimal("0")
    rules: List[CartRuleDiscount] = field(default_factory=list)


@dataclass(slots=True)
class CartItemDTO:
    product: Any  # ProductModel
    variant: Any  # VariantModel
    quantity: int
    surface_finish: Any = None
    cloth: Any = None
    glass: Any = None
    weight_category: Any = None
    is_gift: bool = False
    # Unit prices keyed by ISO currency code
    prices: Dict[str, Decimal] = field(default_factory=dict)

    def get_price(self, currency) -> Decimal:
        code = getattr(currency, "code", currency)
        if code not in self.prices:
            raise ValueError(f"Variant {getattr(self.variant, 'id', None)} has no price in {code}")
        return self.prices[code]


class ICartContract(ABC):
    """Contract for the shopping cart consumed by order placement."""

    statistics: Optional[CartStatistics] = None

    @property
    @abstractmethod
    def customer(self):
        """Customer owning the cart, or None for guests."""
        raise NotImplementedError

    @abstractmethod
    def init(self, save: bool = False):
        """Loads the persisted cart record (CartModel); `save` flushes it."""
        raise NotImplementedError

    @abstractmethod
    def calculate_statistics(self, save: bool = False) -> CartStatistics:
        """Computes prices and discounts and stores them on `statistics`."""
        raise NotImplementedError

    @abstractmethod
    def get_items(self) -> List[CartItemDTO]:
        raise NotImplementedError
