"""
Services of the orders bounded context.
"""

from .service_order import OrderService
from .service_order_responses import OrderResponseBuilder
