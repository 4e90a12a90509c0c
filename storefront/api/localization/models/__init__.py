"""
Models of the localization bounded context.
"""

from .model_locale import CurrencyModel, LocaleModel

__all__ = [
    "CurrencyModel",
    "LocaleModel",
]
