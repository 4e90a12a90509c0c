"""
Models of the catalog bounded context.
"""

from .model_product import (
    CategoryModel,
    CategoryTranslationModel,
    ProductModel,
    ProductTranslationModel,
)
from .model_variant import (
    VariantModel,
    VariantPriceModel,
    ImageModel,
    VariantImageModel,
    VariantParameterModel,
)
from .model_parameter import (
    ParameterModel,
    ParameterTranslationModel,
    ParameterValueModel,
    ParameterValueTranslationModel,
)
from .model_item_options import (
    AvailabilityModel,
    AvailabilityTranslationModel,
    SurfaceFinishModel,
    SurfaceFinishTranslationModel,
    ClothModel,
    ClothTranslationModel,
    GlassModel,
    GlassTranslationModel,
    WeightCategoryModel,
    WeightCategoryTranslationModel,
)

__all__ = [
    "CategoryModel",
    "CategoryTranslationModel",
    "ProductModel",
    "ProductTranslationModel",
    "VariantModel",
    "VariantPriceModel",
    "ImageModel",
    "VariantImageModel",
    "VariantParameterModel",
    "ParameterModel",
    "ParameterTranslationModel",
    "ParameterValueModel",
    "ParameterValueTranslationModel",
    "AvailabilityModel",
    "AvailabilityTranslationModel",
    "SurfaceFinishModel",
    "SurfaceFinishTranslationModel",
    "ClothModel",
    "ClothTranslationModel",
    "GlassModel",
    "GlassTranslationModel",
    "WeightCategoryModel",
    "WeightCategoryTranslationModel",
]
