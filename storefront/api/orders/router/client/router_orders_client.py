from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from storefront.api.cart.contracts.cart_contract import ICartContract
from storefront.api.cart.contracts.dependencies import get_cart_contract
from storefront.api.orders.schemas.schema_order import (
    OrderResponse,
    PaymentResultResponse,
    PlaceOrderResponse,
)
from storefront.api.orders.services.dependencies import get_order_service
from storefront.api.orders.services.service_order import OrderService
from storefront.api.orders.services.service_order_responses import OrderResponseBuilder
from storefront.utils.logger import logger

router = APIRouter(prefix="/{locale}/orders", tags=["Client - Orders"])


# ======================================================================
# ============================ CHECKOUT ================================
@router.post("", response_model=PlaceOrderResponse, status_code=status.HTTP_201_CREATED)
async def place_order(
    cart: ICartContract = Depends(get_cart_contract),
    svc: OrderService = Depends(get_order_service),
):
    """
    Turns the cart identified by `X-Cart-Token` into an order.

    For online payment methods the response also carries the parameters the
    client posts to the card gateway.
    """
    logger.info(f"[Orders] checkout requested locale={svc.locale.icu}")
    order = await svc.place_order(cart)
    payment = svc.get_payment_redirect(order)
    return OrderResponseBuilder.placed_order_to_response(order, payment)


# ======================================================================
# ============================ DETAIL ==================================
@router.get("/{index}", response_model=OrderResponse)
def get_order_detail(
    index: str = Path(..., description="Order index, ex.: 2610001"),
    hash: str = Query(..., description="Secret order hash"),
    svc: OrderService = Depends(get_order_service),
):
    order = svc.get_by_index(index)
    if not order or not order.has_hash(hash):
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Order not found")
    return OrderResponseBuilder.order_to_response(order)


# ======================================================================
# ============================ PAYMENT =================================
@router.get("/{index}/payment", response_model=PaymentResultResponse, name="order_payment")
def order_payment(
    index: str = Path(...),
    hash: str = Query(...),
    prcode: Optional[int] = Query(None, alias="PRCODE"),
    srcode: Optional[int] = Query(None, alias="SRCODE"),
    result_text: Optional[str] = Query(None, alias="RESULTTEXT"),
    svc: OrderService = Depends(get_order_service),
):
    """Return address of the card gateway; only reports the payment result."""
    order = svc.get_by_index_and_hash(index, hash)
    paid = prcode == 0 and srcode == 0
    logger.info(f"[Orders] payment result index={order.index} PRCODE={prcode} SRCODE={srcode} paid={paid}")
    return PaymentResultResponse(
        index=order.index,
        paid=paid,
        prcode=prcode,
        srcode=srcode,
        result_text=result_text,
    )
