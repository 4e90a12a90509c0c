"""
Schemas of the orders bounded context.
"""

from .schema_order import (
    OrderResponse,
    OrderItemOut,
    PlaceOrderResponse,
    PaymentRedirectOut,
    PaymentResultResponse,
)

__all__ = [
    "OrderResponse",
    "OrderItemOut",
    "PlaceOrderResponse",
    "PaymentRedirectOut",
    "PaymentResultResponse",
]
