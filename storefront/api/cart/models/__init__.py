"""
Models of the cart bounded context.
"""

from .model_cart import CartModel, CartItemModel, cart_rule_association

__all__ = [
    "CartModel",
    "CartItemModel",
    "cart_rule_association",
]
