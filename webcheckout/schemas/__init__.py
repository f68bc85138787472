from webcheckout.schemas.checkout import (
    CheckoutFormRequest,
    CheckoutFormResponse,
    CurrenciesResponse,
    OrderItemRequest,
)

__all__ = [
    "CheckoutFormRequest",
    "CheckoutFormResponse",
    "CurrenciesResponse",
    "OrderItemRequest",
]
