import logging
from contextlib import asynccontextmanager
from urllib.parse import urlparse

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from webcheckout.api import checkout
from webcheckout.config import LOG_LEVELS, PAYPAL_ENVIRONMENTS, settings

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL if settings.LOG_LEVEL in LOG_LEVELS else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("webcheckout.startup")


def _is_http_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in {"http", "https"} and bool(parsed.hostname)


def _get_cors_origins(cors_raw: str) -> list[str]:
    return [origin.strip() for origin in cors_raw.split(",") if origin.strip()]


def _validate_required_env_for_runtime() -> None:
    errors = []

    if settings.LOG_LEVEL not in LOG_LEVELS:
        errors.append(f"LOG_LEVEL must be one of {', '.join(sorted(LOG_LEVELS))} (got '{settings.LOG_LEVEL}').")

    if not settings.PAYPAL_BUSINESS:
        errors.append("PAYPAL_BUSINESS is required.")

    paypal_env = settings.PAYPAL_ENV
    if paypal_env not in PAYPAL_ENVIRONMENTS:
        errors.append(
            f"PAYPAL_ENV must be one of {', '.join(sorted(PAYPAL_ENVIRONMENTS))} (got '{paypal_env}')."
        )

    if not _is_http_url(settings.BASE_URL):
        errors.append("BASE_URL must be an absolute http(s) URL, e.g. https://shop.example.com")

    if not _is_http_url(settings.PAYPAL_SUBMIT_URL):
        errors.append(f"PayPal submit URL for PAYPAL_ENV={paypal_env} must be an absolute http(s) URL.")

    for name in ("PAYPAL_RETURN_PATH", "PAYPAL_CANCEL_PATH", "PAYPAL_NOTIFY_PATH"):
        if "{order_id}" not in getattr(settings, name):
            errors.append(f"{name} must contain an {{order_id}} placeholder.")

    origins = _get_cors_origins(settings.CORS_ORIGINS)
    if not origins:
        errors.append("CORS_ORIGINS must contain at least one comma-separated origin URL.")
    else:
        invalid_origins = [origin for origin in origins if not _is_http_url(origin)]
        if invalid_origins:
            errors.append(f"CORS_ORIGINS contains invalid URL(s): {', '.join(invalid_origins)}")

    if paypal_env == "live" and urlparse(settings.BASE_URL).hostname in {"localhost", "127.0.0.1"}:
        logger.warning("BASE_URL points to localhost with PAYPAL_ENV=live; PayPal cannot reach the notify URL.")

    if errors:
        raise RuntimeError("Startup environment validation failed: " + " | ".join(errors))


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup initiated.")
    try:
        _validate_required_env_for_runtime()
    except RuntimeError:
        logger.exception("Configuration check failed.")
        raise
    logger.info(
        "PayPal Web Checkout configured: env=%s, submit_url=%s",
        settings.PAYPAL_ENV,
        settings.PAYPAL_SUBMIT_URL,
    )
    logger.info("Application startup completed successfully.")
    yield


app = FastAPI(
    title="PayPal Web Checkout API",
    description=(
        "Builds the hidden-field form that redirects a payer to PayPal Web Checkout. "
        "Rendering and submitting the form is up to the caller."
    ),
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Checkout", "description": "PayPal Web Checkout form and accepted currencies."},
    ],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_cors_origins(settings.CORS_ORIGINS),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(checkout.router, prefix="/api/checkout/paypal", tags=["Checkout"])


@app.get("/")
def root():
    return {"status": "ok", "service": "PayPal Web Checkout API"}


@app.get("/health")
def health():
    return {"status": "ok"}
