import httpx
from fastapi import Depends

from clients.stripe_client import StripeCheckoutClient
from core.config import Settings, get_settings
from services.checkout_service import CheckoutService


def get_http_transport() -> httpx.AsyncBaseTransport | None:
    # httpx picks its default transport when this is None
    return None


def get_checkout_service(
    settings: Settings = Depends(get_settings),
    transport: httpx.AsyncBaseTransport | None = Depends(get_http_transport)
) -> CheckoutService | None:
    """Returns None when no Stripe secret key is configured."""
    if not settings.STRIPE_SECRET_KEY:
        return None

    client = StripeCheckoutClient(
        secret_key=settings.STRIPE_SECRET_KEY,
        api_base=settings.STRIPE_API_BASE,
        timeout_seconds=settings.STRIPE_TIMEOUT_SECONDS,
        transport=transport
    )
    return CheckoutService(
        client=client,
        currency=settings.DONATION_CURRENCY,
        organization_name=settings.ORGANIZATION_NAME
    )
