from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Optional, Union
from urllib.parse import urlparse

ORDER_NUMBER_MAX_DIGITS = 15
RESPONSE_URL_MAX_LENGTH = 300


@dataclass(frozen=True, slots=True)
class OrderNumber:
    """Unique payment number sent as ORDERNUMBER (numeric, max. 15 digits)."""

    value: int

    def __post_init__(self) -> None:
        if int(self.value) <= 0:
            raise ValueError("ORDERNUMBER must be a positive number")
        if len(str(int(self.value))) > ORDER_NUMBER_MAX_DIGITS:
            raise ValueError(f"ORDERNUMBER can have at most {ORDER_NUMBER_MAX_DIGITS} digits")

    def __str__(self) -> str:
        return str(int(self.value))


@dataclass(frozen=True, slots=True)
class Amount:
    """
    Amount to charge. GP WebPay expects the smallest currency unit, so the
    value is converted to pennies unless `convert_to_pennies` is False.
    """

    amount: Union[Decimal, int, float, str]
    convert_to_pennies: bool = True

    def __post_init__(self) -> None:
        if Decimal(str(self.amount)) < 0:
            raise ValueError("AMOUNT cannot be negative")

    @property
    def pennies(self) -> int:
        value = Decimal(str(self.amount))
        if self.convert_to_pennies:
            value = value * 100
        return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    def __str__(self) -> str:
        return str(self.pennies)


@dataclass(frozen=True, slots=True)
class Currency:
    """ISO 4217 numeric currency code, ex.: 203 for CZK."""

    code: int

    def __post_init__(self) -> None:
        if not 0 < int(self.code) <= 999:
            raise ValueError(f"Invalid ISO 4217 numeric currency code: {self.code}")

    def __str__(self) -> str:
        return f"{int(self.code):03d}"


@dataclass(frozen=True, slots=True)
class ResponseUrl:
    url: str

    def __post_init__(self) -> None:
        parsed = urlparse(self.url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"URL must be an absolute http(s) URL: {self.url!r}")
        if len(self.url) > RESPONSE_URL_MAX_LENGTH:
            raise ValueError(f"URL can have at most {RESPONSE_URL_MAX_LENGTH} characters")

    def __str__(self) -> str:
        return self.url


@dataclass(frozen=True, slots=True)
class Operation:
    """CREATE_ORDER request parameters for the GP WebPay card gateway."""

    order_number: OrderNumber
    amount: Amount
    currency: Currency
    gateway: Optional[str] = None
    response_url: Optional[ResponseUrl] = None

    OPERATION = "CREATE_ORDER"

    def to_params(self, merchant_number: str, deposit_flag: int = 1) -> Dict[str, str]:
        """Ordered request parameters (signing is done by the gateway client)."""
        if not merchant_number:
            raise ValueError("MERCHANTNUMBER is required")
        if deposit_flag not in (0, 1):
            raise ValueError("DEPOSITFLAG must be 0 or 1")

        params: Dict[str, str] = {
            "MERCHANTNUMBER": str(merchant_number),
            "OPERATION": self.OPERATION,
            "ORDERNUMBER": str(self.order_number),
            "AMOUNT": str(self.amount),
            "CURRENCY": str(self.currency),
            "DEPOSITFLAG": str(deposit_flag),
        }
        if self.response_url is not None:
            params["URL"] = str(self.response_url)
        return params
