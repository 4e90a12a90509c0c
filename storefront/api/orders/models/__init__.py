"""
Models of the orders bounded context.
"""

from .model_order import OrderModel
from .model_order_item import OrderItemModel
from .model_order_voucher import OrderVoucherModel
from .model_order_status import OrderStatusModel, OrderStatusTranslationModel

__all__ = [
    "OrderModel",
    "OrderItemModel",
    "OrderVoucherModel",
    "OrderStatusModel",
    "OrderStatusTranslationModel",
]
