from webcheckout.exceptions import CurrencyNotSupportedError

# Currencies accepted by PayPal Web Checkout. Matched exactly, no case folding.
ALLOWED_CURRENCIES = frozenset(
    {
        "AUD",
        "BRL",
        "CAD",
        "CZK",
        "DKK",
        "EUR",
        "HKD",
        "HUF",
        "ILS",
        "JPY",
        "MYR",
        "MXN",
        "NOK",
        "NZD",
        "PHP",
        "PLN",
        "GBP",
        "RUB",
        "SGD",
        "SEK",
        "CHF",
        "TWD",
        "THB",
        "TRY",
        "USD",
    }
)


def validate_currency(code: str) -> str:
    """Return ``code`` unchanged when PayPal accepts it, raise otherwise."""
    if code not in ALLOWED_CURRENCIES:
        raise CurrencyNotSupportedError(code)
    return code
