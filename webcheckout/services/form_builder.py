import logging
from decimal import Decimal
from functools import reduce
from typing import Iterable

from webcheckout.exceptions import InvalidAmountError
from webcheckout.models import FORM_METHOD, FormDescriptor, MerchantConfig, OrderContext, OrderItem, UrlResolver
from webcheckout.services.currency import validate_currency

logger = logging.getLogger(__name__)

MINOR_UNITS_PER_MAJOR = Decimal("100")
TWO_PLACES = Decimal("0.01")

# Order of the hidden fields posted to PayPal.
FIELD_NAMES = (
    "item_name",
    "amount",
    "business",
    "return",
    "cancel_return",
    "notify_url",
    "item_number",
    "currency_code",
    "env",
)


def format_amount(amount_minor_units: int) -> str:
    """Convert minor units (cents) to the decimal string PayPal expects, e.g. 1050 -> "10.50"."""
    if isinstance(amount_minor_units, bool) or not isinstance(amount_minor_units, int):
        raise InvalidAmountError(amount_minor_units)
    if amount_minor_units < 0:
        raise InvalidAmountError(amount_minor_units)
    amount = Decimal(amount_minor_units) / MINOR_UNITS_PER_MAJOR
    return str(amount.quantize(TWO_PLACES))


def build_item_name(items: Iterable[OrderItem]) -> str:
    """Join order line names with single spaces; an empty order gives ""."""
    return reduce(lambda product_name, item: f"{product_name} {item.name}".strip(), items, "")


class CheckoutFormBuilder:
    def build(self, order: OrderContext, merchant: MerchantConfig, resolver: UrlResolver) -> FormDescriptor:
        """Shape the hidden-field form that redirects the payer to PayPal Web Checkout.

        Raises InvalidAmountError, CurrencyNotSupportedError, or whatever the resolver
        raises (UrlResolutionError) without substituting defaults.
        """
        amount = format_amount(order.amount_minor_units)
        currency = validate_currency(order.currency_code)
        urls = resolver.urls_for(order.order_id)
        item_name = build_item_name(order.items)

        values = (
            item_name,
            amount,
            merchant.business_id,
            urls.return_url,
            urls.cancel_url,
            urls.notify_url,
            order.order_id,
            currency,
            merchant.environment,
        )
        fields = {name: str(value) for name, value in zip(FIELD_NAMES, values)}

        logger.debug(
            "Built PayPal checkout form for order %s: amount=%s %s, env=%s",
            order.order_id,
            amount,
            currency,
            merchant.environment,
        )
        return FormDescriptor(action_url=urls.base_submit_url, fields=fields, method=FORM_METHOD)
