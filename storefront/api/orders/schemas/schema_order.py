from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NamedOptionOut(BaseModel):
    id: int
    name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class OrderStatusOut(BaseModel):
    id: int
    code: str
    color: Optional[str] = None
    name: Optional[str] = None


class DeliveryMethodOut(BaseModel):
    id: int
    code: str
    name: Optional[str] = None


class PaymentMethodOut(BaseModel):
    id: int
    code: str
    name: Optional[str] = None
    online: bool = False


class AddressOut(BaseModel):
    company: Optional[str] = None
    company_id: Optional[str] = None
    vat_id: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None
    country: Optional[str] = None


class DeliveryAddressOut(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company: Optional[str] = None
    phone: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None
    country: Optional[str] = None


class VariantParameterOut(BaseModel):
    name: Optional[str] = None
    value: Optional[str] = None


class OrderItemOut(BaseModel):
    id: int
    product_id: int
    product_name: Optional[str] = None
    category_name: Optional[str] = None
    variant_id: int
    variant_code: Optional[str] = None
    quantity: int
    is_gift: bool = False
    single_price: float
    total_price: float
    availability: Optional[str] = None
    surface_finish: Optional[NamedOptionOut] = None
    cloth: Optional[NamedOptionOut] = None
    glass: Optional[NamedOptionOut] = None
    weight_category: Optional[NamedOptionOut] = None
    images: List[str] = Field(default_factory=list)
    parameters: List[VariantParameterOut] = Field(default_factory=list)


class OrderVoucherOut(BaseModel):
    code: str
    discount: float


class OrderResponse(BaseModel):
    id: int
    index: str
    hash: str
    locale: str
    currency: str
    created_at: Optional[datetime] = None
    status: Optional[OrderStatusOut] = None
    delivery_method: Optional[DeliveryMethodOut] = None
    payment_method: Optional[PaymentMethodOut] = None

    email: Optional[str] = None
    phone: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    billing_address: AddressOut
    delivery_address: Optional[DeliveryAddressOut] = None
    note: Optional[str] = None
    assembly: bool = False
    full_delivery: bool = False

    products_price: float
    total_discount: float
    delivery_price: float
    assembly_price: float
    full_delivery_price: float
    total_delivery_price: float
    total_price: float
    deposit: float
    amount_to_pay: float

    items: List[OrderItemOut] = Field(default_factory=list)
    vouchers: List[OrderVoucherOut] = Field(default_factory=list)


class PaymentRedirectOut(BaseModel):
    """Parameters the client posts to the card gateway."""
    gateway_url: str
    params: Dict[str, str]


class PlaceOrderResponse(BaseModel):
    order: OrderResponse
    payment: Optional[PaymentRedirectOut] = None


class PaymentResultResponse(BaseModel):
    index: str
    paid: bool
    prcode: Optional[int] = None
    srcode: Optional[int] = None
    result_text: Optional[str] = None
