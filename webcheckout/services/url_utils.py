from urllib.parse import quote, urlsplit, urlunsplit

from webcheckout.exceptions import CheckoutConfigurationError


ALLOWED_URL_SCHEMES = {"http", "https"}


def validate_absolute_http_url(url: str, field_name: str) -> str:
    """Validate a configured URL used for checkout callbacks or submission.

    Allows only absolute HTTP(S) URLs without embedded user credentials.
    """
    parts = urlsplit(url)
    if parts.scheme not in ALLOWED_URL_SCHEMES or not parts.netloc:
        raise CheckoutConfigurationError(f"{field_name} must be an absolute http(s) URL")
    if parts.username or parts.password:
        raise CheckoutConfigurationError(f"{field_name} must not contain credentials")
    return url


def join_path(base_url: str, path: str) -> str:
    """Append ``path`` to the path of ``base_url``, keeping its query and fragment."""
    parts = urlsplit(base_url)
    joined = parts.path.rstrip("/") + "/" + path.lstrip("/")
    return urlunsplit((parts.scheme, parts.netloc, joined, parts.query, parts.fragment))


def render_path(template: str, order_id: str) -> str:
    """Fill ``{order_id}`` in a route template with the percent-encoded order id."""
    return template.replace("{order_id}", quote(order_id, safe=""))
