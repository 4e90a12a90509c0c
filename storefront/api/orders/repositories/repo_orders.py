from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, contains_eager, selectinload

from storefront.api.catalog.models import (
    AvailabilityModel,
    AvailabilityTranslationModel,
    CategoryModel,
    CategoryTranslationModel,
    ClothModel,
    ClothTranslationModel,
    GlassModel,
    GlassTranslationModel,
    ParameterModel,
    ParameterTranslationModel,
    ParameterValueModel,
    ParameterValueTranslationModel,
    ProductModel,
    ProductTranslationModel,
    SurfaceFinishModel,
    SurfaceFinishTranslationModel,
    VariantImageModel,
    VariantModel,
    VariantParameterModel,
    WeightCategoryModel,
    WeightCategoryTranslationModel,
)
from storefront.api.orders.models.model_order import OrderModel
from storefront.api.orders.models.model_order_item import OrderItemModel
from storefront.api.orders.models.model_order_status import (
    OrderStatusModel,
    OrderStatusTranslationModel,
)
from storefront.api.registry.models import (
    DeliveryMethodModel,
    DeliveryMethodTranslationModel,
    PaymentMethodModel,
    PaymentMethodTranslationModel,
)


class OrderRepository:
    def __init__(self, db: Session):
        self.db = db

    # ------------- Queries -------------
    def get_order(self, order_id: int) -> Optional[OrderModel]:
        return self.db.get(OrderModel, order_id)

    def get_by_index_plain(self, index: str) -> Optional[OrderModel]:
        return self.db.query(OrderModel).filter(OrderModel.index == index).first()

    def get_default_status(self) -> Optional[OrderStatusModel]:
        return (
            self.db.query(OrderStatusModel)
            .filter(OrderStatusModel.is_default.is_(True))
            .order_by(OrderStatusModel.id)
            .first()
        )

    def get_last_index_since(self, since: datetime) -> Optional[str]:
        """
        Highest order index created on or after `since`.

        Indexes are strings, so a longer one is always the higher number
        (ex.: 26101000 > 2610999).
        """
        return (
            self.db.query(OrderModel.index)
            .filter(OrderModel.created_at >= since)
            .order_by(func.length(OrderModel.index).desc(), OrderModel.index.desc())
            .limit(1)
            .scalar()
        )

    def get_by_index(self, index: str) -> Optional[OrderModel]:
        """
        Loads the order with everything the detail page renders in one query.

        Translations are restricted to the order's locale and items whose
        variant or product was removed are left out. Already loaded orders
        are overwritten with the filtered state.
        """
        order_locale = OrderModel.locale_id
        variant = contains_eager(OrderModel.items).contains_eager(OrderItemModel.variant)
        product = contains_eager(OrderModel.items).contains_eager(OrderItemModel.product)
        item = contains_eager(OrderModel.items)

        rows = (
            self.db.query(OrderModel)
            .populate_existing()
            .outerjoin(OrderModel.status)
            .outerjoin(OrderStatusModel.translations.and_(OrderStatusTranslationModel.locale_id == order_locale))
            .outerjoin(OrderModel.delivery_method)
            .outerjoin(DeliveryMethodModel.translations.and_(DeliveryMethodTranslationModel.locale_id == order_locale))
            .outerjoin(OrderModel.payment_method)
            .outerjoin(PaymentMethodModel.translations.and_(PaymentMethodTranslationModel.locale_id == order_locale))
            .outerjoin(OrderModel.items)
            .join(OrderItemModel.variant.and_(VariantModel.removed.is_(False)))
            .join(OrderItemModel.product.and_(ProductModel.removed.is_(False)))
            .outerjoin(ProductModel.category)
            .outerjoin(CategoryModel.translations.and_(CategoryTranslationModel.locale_id == order_locale))
            .outerjoin(ProductModel.translations.and_(ProductTranslationModel.locale_id == order_locale))
            .outerjoin(VariantModel.images)
            .outerjoin(VariantImageModel.image)
            .outerjoin(VariantModel.parameters)
            .outerjoin(VariantParameterModel.parameter)
            .outerjoin(ParameterModel.translations.and_(ParameterTranslationModel.locale_id == order_locale))
            .outerjoin(VariantParameterModel.value)
            .outerjoin(ParameterValueModel.translations.and_(ParameterValueTranslationModel.locale_id == order_locale))
            .outerjoin(VariantModel.availability)
            .outerjoin(AvailabilityModel.translations.and_(AvailabilityTranslationModel.locale_id == order_locale))
            .outerjoin(OrderItemModel.surface_finish)
            .outerjoin(SurfaceFinishModel.translations.and_(SurfaceFinishTranslationModel.locale_id == order_locale))
            .outerjoin(OrderItemModel.cloth)
            .outerjoin(ClothModel.translations.and_(ClothTranslationModel.locale_id == order_locale))
            .outerjoin(OrderItemModel.glass)
            .outerjoin(GlassModel.translations.and_(GlassTranslationModel.locale_id == order_locale))
            .outerjoin(OrderItemModel.weight_category)
            .outerjoin(WeightCategoryModel.translations.and_(WeightCategoryTranslationModel.locale_id == order_locale))
            .options(
                contains_eager(OrderModel.status).contains_eager(OrderStatusModel.translations),
                contains_eager(OrderModel.delivery_method).contains_eager(DeliveryMethodModel.translations),
                contains_eager(OrderModel.payment_method).contains_eager(PaymentMethodModel.translations),
                product.contains_eager(ProductModel.category).contains_eager(CategoryModel.translations),
                product.contains_eager(ProductModel.translations),
                variant.contains_eager(VariantModel.images).contains_eager(VariantImageModel.image),
                variant.contains_eager(VariantModel.parameters)
                .contains_eager(VariantParameterModel.parameter)
                .contains_eager(ParameterModel.translations),
                variant.contains_eager(VariantModel.parameters)
                .contains_eager(VariantParameterModel.value)
                .contains_eager(ParameterValueModel.translations),
                variant.contains_eager(VariantModel.availability).contains_eager(AvailabilityModel.translations),
                item.contains_eager(OrderItemModel.surface_finish).contains_eager(SurfaceFinishModel.translations),
                item.contains_eager(OrderItemModel.cloth).contains_eager(ClothModel.translations),
                item.contains_eager(OrderItemModel.glass).contains_eager(GlassModel.translations),
                item.contains_eager(OrderItemModel.weight_category).contains_eager(WeightCategoryModel.translations),
                selectinload(OrderModel.vouchers),
            )
            .filter(OrderModel.index == index)
            .order_by(OrderItemModel.id.asc(), VariantImageModel.position.asc())
            .all()
        )
        # .first() would LIMIT the joined collection rows away
        return rows[0] if rows else None

    # ------------- Persistence -------------
    def add(self, order: OrderModel) -> None:
        self.db.add(order)

    def flush(self):
        self.db.flush()

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
