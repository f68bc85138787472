from webcheckout.models.checkout import (
    FORM_METHOD,
    CallbackUrls,
    FormDescriptor,
    MerchantConfig,
    OrderContext,
    OrderItem,
    UrlResolver,
)

__all__ = [
    "FORM_METHOD",
    "CallbackUrls",
    "FormDescriptor",
    "MerchantConfig",
    "OrderContext",
    "OrderItem",
    "UrlResolver",
]
