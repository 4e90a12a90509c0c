from __future__ import annotations

import time
from decimal import Decimal
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.api.cart.contracts.cart_contract import ICartContract
from storefront.api.localization.models.model_locale import LocaleModel
from storefront.api.orders.events.order_events import OrderUpdatedEvent
from storefront.api.orders.models.model_order import OrderModel
from storefront.api.orders.models.model_order_item import OrderItemModel
from storefront.api.orders.models.model_order_voucher import OrderVoucherModel
from storefront.api.orders.repositories.repo_orders import OrderRepository
from storefront.config.settings import (
    GPWEBPAY_DEPOSIT_FLAG,
    GPWEBPAY_MERCHANT_NUMBER,
    GPWEBPAY_URL,
)
from storefront.core.event_bus import EventBus
from storefront.core.link_generator import LinkGenerator
from storefront.integrations.gpwebpay import Amount, Currency, Operation, OrderNumber, ResponseUrl
from storefront.utils.database_utils import first_day_of_month, now_trimmed
from storefront.utils.logger import logger

INDEX_PREFIX_FORMAT = "%y%m"
PAYMENT_RESPONSE_ROUTE = "order_payment"


class OrderService:
    def __init__(
        self,
        db: Session,
        event_bus: EventBus,
        link_generator: LinkGenerator,
        locale: LocaleModel,
    ):
        self.db = db
        self.repo = OrderRepository(db)
        self.event_bus = event_bus
        self.link_generator = link_generator
        self.locale = locale

    # ---------------- Placement ----------------
    async def place_order(self, cart: ICartContract) -> OrderModel:
        cart_object = cart.init(True)
        cart.calculate_statistics(True)
        statistics = cart.statistics
        cart_items = cart.get_items()

        if not cart_items:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Cart is empty")
        if cart_object.delivery_method is None:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Delivery method is required")
        if cart_object.payment_method is None:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Payment method is required")

        order = OrderModel()
        order.locale = self.locale
        order.index = self.generate_index()
        order.created_at = now_trimmed()
        order.generate_secure_hash()
        order.customer = cart.customer
        order.status = self.repo.get_default_status()
        self.repo.add(order)

        order.delivery_method = cart_object.delivery_method
        order.payment_method = cart_object.payment_method
        self.save_addresses(order, cart_object)
        order.hydrate_from_cart(cart_object)

        order.products_price = statistics.products_price
        order.total_discount = statistics.total_discount
        order.delivery_price = statistics.delivery_price
        order.total_delivery_price = statistics.delivery_price
        order.assembly_price = Decimal("0")
        order.full_delivery_price = Decimal("0")
        if order.assembly:
            order.assembly_price = statistics.assembly_price
            order.total_delivery_price += statistics.assembly_price
        if order.full_delivery:
            order.full_delivery_price = statistics.full_delivery_price
            order.total_delivery_price += statistics.full_delivery_price
        order.total_price = statistics.total_price
        order.deposit = statistics.deposit

        for applied in statistics.rules:
            order.vouchers.append(OrderVoucherModel(cart_rule=applied.rule, discount=applied.discount))
            applied.rule.increase_use_counter()

        for cart_item in cart_items:
            item = OrderItemModel(
                product=cart_item.product,
                variant=cart_item.variant,
                quantity=cart_item.quantity,
                surface_finish=cart_item.surface_finish,
                cloth=cart_item.cloth,
                glass=cart_item.glass,
                weight_category=cart_item.weight_category,
                is_gift=cart_item.is_gift,
            )
            if item.is_gift:
                item.single_price = Decimal("0")
            else:
                try:
                    item.single_price = cart_item.get_price(self.locale.currency)
                except ValueError as e:
                    self.repo.rollback()
                    raise HTTPException(status.HTTP_400_BAD_REQUEST, str(e))
            item.total_price = item.calculate_total_price()
            order.items.append(item)

        # Gateway parameters are checked before anything is stored
        try:
            self.get_payment_redirect(order)
        except HTTPException:
            self.repo.rollback()
            raise

        try:
            self.repo.flush()
            self.repo.commit()
        except IntegrityError as e:
            self.repo.rollback()
            logger.warning(f"[Orders] place_order conflict index={order.index}: {e.orig}")
            raise HTTPException(status.HTTP_409_CONFLICT, "Order could not be stored, please try again")

        logger.info(
            f"[Orders] place_order order_id={order.id} index={order.index} "
            f"customer_id={order.customer_id} total={order.total_price}"
        )
        await self.update_order(order.id)
        return order

    async def update_order(self, order_id: int) -> OrderModel:
        order = self.get_order(order_id)
        if not order:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Order not found")
        await self.event_bus.publish(OrderUpdatedEvent.for_order(order))
        return order

    def get_order(self, order_id: int) -> Optional[OrderModel]:
        return self.repo.get_order(order_id)

    def save_addresses(self, order: OrderModel, cart_object) -> None:
        """Addresses are only stored for orders of registered customers."""
        if order.customer is None:
            return
        order.hydrate_address_from_cart(cart_object)

        delivery_method = cart_object.delivery_method
        is_pickup = delivery_method is not None and delivery_method.is_personal_pickup()
        if not is_pickup and cart_object.has_delivery_address():
            order.hydrate_delivery_address_from_cart(cart_object)

    # ---------------- Index ----------------
    def generate_index(self) -> str:
        """
        Monthly order number: `yymm` followed by the sequence within the month,
        ex.: 2610001, 2610002, ... The sequence keeps growing past 999.
        """
        now = now_trimmed()
        prefix = now.strftime(INDEX_PREFIX_FORMAT)
        last = self.repo.get_last_index_since(first_day_of_month(now))

        sequence = 0
        if last:
            suffix = last[len(prefix):]
            sequence = int(suffix) if suffix.isdigit() else 0
        return f"{prefix}{sequence + 1:03d}"

    # ---------------- Reading ----------------
    def get_by_index(self, index: str) -> Optional[OrderModel]:
        return self.repo.get_by_index(index)

    def get_by_index_and_hash(self, index: str, order_hash: str) -> OrderModel:
        order = self.repo.get_by_index_plain(index)
        if not order or not order.has_hash(order_hash):
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Order not found")
        return order

    # ---------------- Payment ----------------
    def get_online_operation(self, order: OrderModel) -> Operation:
        response_url = self.link_generator.link(
            PAYMENT_RESPONSE_ROUTE,
            {"index": order.index, "locale": order.locale.icu},
            {"hash": order.hash},
        )
        return Operation(
            order_number=OrderNumber(int(time.time())),
            amount=Amount(order.amount_to_pay),
            currency=Currency(order.locale.currency.get_gpwebpay_identifier()),
            gateway=None,
            response_url=ResponseUrl(response_url),
        )

    def get_payment_redirect(self, order: OrderModel) -> Optional[dict]:
        """Gateway URL and request parameters for orders paid online."""
        if order.payment_method is None or not order.payment_method.online:
            return None
        try:
            params = self.get_online_operation(order).to_params(GPWEBPAY_MERCHANT_NUMBER, GPWEBPAY_DEPOSIT_FLAG)
        except ValueError as e:
            logger.error(f"[Orders] payment parameters failed index={order.index}: {e}")
            raise HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, "Payment gateway is not configured")
        return {"gateway_url": GPWEBPAY_URL, "params": params}
