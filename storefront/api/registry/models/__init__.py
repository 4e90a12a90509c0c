"""
Models of the registry bounded context (customers, shipping/payment, vouchers).
"""

from .model_customer import CustomerModel
from .model_shipping_payment import (
    DeliveryMethodModel,
    DeliveryMethodTranslationModel,
    PaymentMethodModel,
    PaymentMethodTranslationModel,
)
from .model_cart_rule import CartRuleModel, CartRuleDiscountType

__all__ = [
    "CustomerModel",
    "DeliveryMethodModel",
    "DeliveryMethodTranslationModel",
    "PaymentMethodModel",
    "PaymentMethodTranslationModel",
    "CartRuleModel",
    "CartRuleDiscountType",
]
