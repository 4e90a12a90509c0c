from __future__ import annotations

from typing import Optional

from storefront.api.orders.models.model_order import OrderModel
from storefront.api.orders.models.model_order_item import OrderItemModel
from storefront.api.orders.schemas.schema_order import (
    AddressOut,
    DeliveryAddressOut,
    DeliveryMethodOut,
    NamedOptionOut,
    OrderItemOut,
    OrderResponse,
    OrderStatusOut,
    OrderVoucherOut,
    PaymentMethodOut,
    PaymentRedirectOut,
    PlaceOrderResponse,
    VariantParameterOut,
)
from storefront.database.translations import translated_name


def _money(value) -> float:
    return float(value or 0)


def _option(option, locale_id: int) -> Optional[NamedOptionOut]:
    if option is None:
        return None
    return NamedOptionOut(id=option.id, name=translated_name(option.translations, locale_id))


class OrderResponseBuilder:
    """Converts order models into responses, with names in the order's locale."""

    @staticmethod
    def item_to_response(item: OrderItemModel, locale_id: int) -> OrderItemOut:
        product = item.product
        variant = item.variant
        category = product.category if product is not None else None
        return OrderItemOut(
            id=item.id,
            product_id=item.product_id,
            product_name=translated_name(product.translations, locale_id) if product is not None else None,
            category_name=translated_name(category.translations, locale_id) if category is not None else None,
            variant_id=item.variant_id,
            variant_code=variant.code if variant is not None else None,
            quantity=item.quantity,
            is_gift=bool(item.is_gift),
            single_price=_money(item.single_price),
            total_price=_money(item.total_price),
            availability=(
                translated_name(variant.availability.translations, locale_id)
                if variant is not None and variant.availability is not None
                else None
            ),
            surface_finish=_option(item.surface_finish, locale_id),
            cloth=_option(item.cloth, locale_id),
            glass=_option(item.glass, locale_id),
            weight_category=_option(item.weight_category, locale_id),
            images=[vi.image.path for vi in (variant.images if variant is not None else []) if vi.image is not None],
            parameters=[
                VariantParameterOut(
                    name=translated_name(vp.parameter.translations, locale_id) if vp.parameter else None,
                    value=translated_name(vp.value.translations, locale_id) if vp.value else None,
                )
                for vp in (variant.parameters if variant is not None else [])
            ],
        )

    @staticmethod
    def order_to_response(order: OrderModel) -> OrderResponse:
        locale_id = order.locale_id
        status = order.status
        delivery = order.delivery_method
        payment = order.payment_method
        return OrderResponse(
            id=order.id,
            index=order.index,
            hash=order.hash,
            locale=order.locale.icu,
            currency=order.locale.currency.code,
            created_at=order.created_at,
            status=OrderStatusOut(
                id=status.id,
                code=status.code,
                color=status.color,
                name=translated_name(status.translations, locale_id),
            ) if status else None,
            delivery_method=DeliveryMethodOut(
                id=delivery.id,
                code=delivery.code,
                name=translated_name(delivery.translations, locale_id),
            ) if delivery else None,
            payment_method=PaymentMethodOut(
                id=payment.id,
                code=payment.code,
                name=translated_name(payment.translations, locale_id),
                online=bool(payment.online),
            ) if payment else None,
            email=order.email,
            phone=order.phone,
            first_name=order.first_name,
            last_name=order.last_name,
            billing_address=AddressOut(
                company=order.company,
                company_id=order.company_id,
                vat_id=order.vat_id,
                street=order.street,
                city=order.city,
                zip=order.zip,
                country=order.country,
            ),
            delivery_address=DeliveryAddressOut(
                first_name=order.delivery_first_name,
                last_name=order.delivery_last_name,
                company=order.delivery_company,
                phone=order.delivery_phone,
                street=order.delivery_street,
                city=order.delivery_city,
                zip=order.delivery_zip,
                country=order.delivery_country,
            ) if order.has_delivery_address() else None,
            note=order.note,
            assembly=bool(order.assembly),
            full_delivery=bool(order.full_delivery),
            products_price=_money(order.products_price),
            total_discount=_money(order.total_discount),
            delivery_price=_money(order.delivery_price),
            assembly_price=_money(order.assembly_price),
            full_delivery_price=_money(order.full_delivery_price),
            total_delivery_price=_money(order.total_delivery_price),
            total_price=_money(order.total_price),
            deposit=_money(order.deposit),
            amount_to_pay=_money(order.amount_to_pay),
            items=[OrderResponseBuilder.item_to_response(it, locale_id) for it in order.items],
            vouchers=[
                OrderVoucherOut(code=v.cart_rule.code, discount=_money(v.discount))
                for v in order.vouchers
            ],
        )

    @staticmethod
    def placed_order_to_response(order: OrderModel, payment: Optional[dict]) -> PlaceOrderResponse:
        return PlaceOrderResponse(
            order=OrderResponseBuilder.order_to_response(order),
            payment=PaymentRedirectOut(**payment) if payment else None,
        )
