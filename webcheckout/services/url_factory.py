from webcheckout.exceptions import CheckoutConfigurationError, UrlResolutionError
from webcheckout.models import CallbackUrls
from webcheckout.services.url_utils import join_path, render_path, validate_absolute_http_url


class UrlFactory:
    """Builds the PayPal callback URLs for an order from configured route templates.

    - return URL: where PayPal sends the payer after a completed payment
    - cancel URL: where PayPal sends the payer after cancelling
    - notify URL: IPN endpoint PayPal calls server-to-server once the payment is processed
    """

    def __init__(
        self,
        base_url: str,
        return_path: str,
        cancel_path: str,
        notify_path: str,
        submit_url: str,
    ):
        self._base_url = base_url
        self._return_path = return_path
        self._cancel_path = cancel_path
        self._notify_path = notify_path
        self._submit_url = submit_url

    @classmethod
    def from_settings(cls) -> "UrlFactory":
        from webcheckout.config import settings

        return cls(
            base_url=settings.BASE_URL,
            return_path=settings.PAYPAL_RETURN_PATH,
            cancel_path=settings.PAYPAL_CANCEL_PATH,
            notify_path=settings.PAYPAL_NOTIFY_PATH,
            submit_url=settings.PAYPAL_SUBMIT_URL,
        )

    @property
    def submit_url(self) -> str:
        return validate_absolute_http_url(self._submit_url, "PayPal submit URL")

    def return_url_for(self, order_id: str) -> str:
        return self._build(self._return_path, order_id)

    def cancel_url_for(self, order_id: str) -> str:
        return self._build(self._cancel_path, order_id)

    def notify_url_for(self, order_id: str) -> str:
        return self._build(self._notify_path, order_id)

    def urls_for(self, order_id: str) -> CallbackUrls:
        return CallbackUrls(
            return_url=self.return_url_for(order_id),
            cancel_url=self.cancel_url_for(order_id),
            notify_url=self.notify_url_for(order_id),
            base_submit_url=self.submit_url,
        )

    def _build(self, template: str, order_id: str) -> str:
        if not isinstance(order_id, str) or not order_id or order_id != order_id.strip():
            raise UrlResolutionError(f"Malformed order id: {order_id!r}", order_id=order_id)
        if "{order_id}" not in template:
            raise CheckoutConfigurationError(
                f"Route template {template!r} has no {{order_id}} placeholder", order_id=order_id
            )
        base_url = validate_absolute_http_url(self._base_url, "BASE_URL")
        return join_path(base_url, render_path(template, order_id))
