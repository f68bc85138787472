import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from webcheckout.dependencies import get_form_builder, get_merchant_config, get_url_resolver
from webcheckout.exceptions import (
    CheckoutConfigurationError,
    CurrencyNotSupportedError,
    InvalidAmountError,
    UrlResolutionError,
)
from webcheckout.models import MerchantConfig, UrlResolver
from webcheckout.schemas.checkout import CheckoutFormRequest, CheckoutFormResponse, CurrenciesResponse
from webcheckout.services.currency import ALLOWED_CURRENCIES
from webcheckout.services.form_builder import CheckoutFormBuilder

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get(
    "/currencies",
    response_model=CurrenciesResponse,
    summary="List currencies accepted by PayPal Web Checkout",
)
def currencies():
    return CurrenciesResponse(currencies=sorted(ALLOWED_CURRENCIES))


@router.post(
    "",
    response_model=CheckoutFormResponse,
    summary="Build the PayPal Web Checkout redirect form",
)
def build_checkout_form(
    body: CheckoutFormRequest,
    merchant: Annotated[MerchantConfig, Depends(get_merchant_config)],
    resolver: Annotated[UrlResolver, Depends(get_url_resolver)],
    builder: Annotated[CheckoutFormBuilder, Depends(get_form_builder)],
):
    """
    Returns the action URL, method and hidden fields of the form that sends
    the payer to PayPal. The caller renders and submits it.
    """
    try:
        form = builder.build(body.to_order_context(), merchant, resolver)
    except CurrencyNotSupportedError as e:
        logger.warning("Rejected checkout for order %s: unsupported currency %r", body.order_id, e.code)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except InvalidAmountError as e:
        logger.warning("Rejected checkout for order %s: invalid amount %r", body.order_id, e.amount)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except CheckoutConfigurationError as e:
        logger.error("Checkout form for order %s failed on configuration: %s", body.order_id, e)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    except UrlResolutionError as e:
        logger.warning("Rejected checkout for order %s: %s", body.order_id, e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return CheckoutFormResponse(action_url=form.action_url, method=form.method, fields=dict(form.fields))
