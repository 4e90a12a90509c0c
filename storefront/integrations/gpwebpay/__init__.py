from .operation import Amount, Currency, Operation, OrderNumber, ResponseUrl

__all__ = [
    "Amount",
    "Currency",
    "Operation",
    "OrderNumber",
    "ResponseUrl",
]
