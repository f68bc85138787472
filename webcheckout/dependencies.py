from fastapi import HTTPException, status

from webcheckout.config import settings
from webcheckout.models import MerchantConfig, UrlResolver
from webcheckout.services.form_builder import CheckoutFormBuilder
from webcheckout.services.url_factory import UrlFactory


def get_merchant_config() -> MerchantConfig:
    business_id = settings.PAYPAL_BUSINESS
    if not business_id:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="PAYPAL_BUSINESS is not set",
        )
    return MerchantConfig(business_id=business_id, environment=settings.PAYPAL_ENV)


def get_url_resolver() -> UrlResolver:
    return UrlFactory.from_settings()


def get_form_builder() -> CheckoutFormBuilder:
    return CheckoutFormBuilder()
