import os
from pathlib import Path

from dotenv import load_dotenv

env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

PAYPAL_ENVIRONMENTS = {"sandbox", "live"}
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings:
    @property
    def BASE_URL(self) -> str:
        return os.getenv("BASE_URL", "http://localhost:8000")

    @property
    def PAYPAL_BUSINESS(self) -> str:
        return os.getenv("PAYPAL_BUSINESS", "").strip()

    @property
    def PAYPAL_ENV(self) -> str:
        return os.getenv("PAYPAL_ENV", "sandbox").strip()

    @property
    def PAYPAL_SANDBOX_URL(self) -> str:
        return os.getenv("PAYPAL_SANDBOX_URL", "https://www.sandbox.paypal.com/cgi-bin/webscr")

    @property
    def PAYPAL_LIVE_URL(self) -> str:
        return os.getenv("PAYPAL_LIVE_URL", "https://www.paypal.com/cgi-bin/webscr")

    @property
    def PAYPAL_SUBMIT_URL(self) -> str:
        """Hosted checkout endpoint for the configured PAYPAL_ENV."""
        if self.PAYPAL_ENV == "live":
            return self.PAYPAL_LIVE_URL
        return self.PAYPAL_SANDBOX_URL

    @property
    def PAYPAL_RETURN_PATH(self) -> str:
        return os.getenv("PAYPAL_RETURN_PATH", "/payment/paypal-web-checkout/ok/{order_id}")

    @property
    def PAYPAL_CANCEL_PATH(self) -> str:
        return os.getenv("PAYPAL_CANCEL_PATH", "/payment/paypal-web-checkout/ko/{order_id}")

    @property
    def PAYPAL_NOTIFY_PATH(self) -> str:
        return os.getenv("PAYPAL_NOTIFY_PATH", "/payment/paypal-web-checkout/process/{order_id}")

    @property
    def CORS_ORIGINS(self) -> str:
        return os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:3001")

    @property
    def LOG_LEVEL(self) -> str:
        return os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()

if not settings.PAYPAL_BUSINESS:
    import warnings
    warnings.warn("PAYPAL_BUSINESS is not set. Checkout forms cannot be built until it is.", UserWarning)
