"""
Contracts of the cart bounded context.
"""

from .cart_contract import (
    ICartContract,
    CartStatistics,
    CartRuleDiscount,
    CartItemDTO,
)

__all__ = [
    "ICartContract",
    "CartStatistics",
    "CartRuleDiscount",
    "CartItemDTO",
]
