class WebCheckoutError(Exception):
    """Base class for errors raised while shaping a hosted checkout form."""


class CurrencyNotSupportedError(WebCheckoutError, ValueError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Currency {code!r} is not supported by PayPal Web Checkout")


class InvalidAmountError(WebCheckoutError, ValueError):
    def __init__(self, amount):
        self.amount = amount
        super().__init__(f"Amount must be a non-negative integer number of minor units, got {amount!r}")


class UrlResolutionError(WebCheckoutError):
    """Raised when callback or submit URLs cannot be produced for an order."""

    def __init__(self, message: str, order_id: str | None = None):
        self.order_id = order_id
        super().__init__(message)


class CheckoutConfigurationError(UrlResolutionError):
    """Raised when a configured URL or route template is unusable."""
