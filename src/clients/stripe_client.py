import logging

import httpx
from pydantic import ValidationError

from models.checkout import (
    CheckoutSessionCreated,
    CheckoutSessionDescriptor,
    CheckoutSessionResult,
    ProviderRejected,
    StripeCheckoutSession,
    StripeErrorBody,
    UpstreamFailure,
)
from utils.form_encoder import encode_form

logger = logging.getLogger(__name__)

CHECKOUT_SESSIONS_PATH = "/v1/checkout/sessions"


class StripeCheckoutClient:
    """
    Talks to the Stripe REST API directly over httpx.

    A new AsyncClient is opened for every call; Mangum may run each
    invocation on its own event loop and pooled connections do not survive
    that.
    """
    def __init__(
        self,
        secret_key: str,
        api_base: str = "https://api.stripe.com",
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None
    ):
        self.secret_key = secret_key
        self.api_base = api_base.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.secret_key}",
            "Content-Type": "application/x-www-form-urlencoded",
        }

    async def create_checkout_session(
        self, descriptor: CheckoutSessionDescriptor
    ) -> CheckoutSessionResult:
        body = encode_form(descriptor.to_form_data())

        try:
            async with httpx.AsyncClient(
                base_url=self.api_base,
                timeout=self.timeout_seconds,
                transport=self.transport
            ) as client:
                response = await client.post(
                    CHECKOUT_SESSIONS_PATH,
                    content=body,
                    headers=self._headers()
                )
        except httpx.HTTPError as e:
            return UpstreamFailure(reason=f"Request to Stripe failed: {e!r}")

        try:
            payload = response.json()
        except ValueError:
            return UpstreamFailure(
                reason=f"Stripe returned a non-JSON body (HTTP {response.status_code})"
            )

        return parse_session_response(payload)


def parse_session_response(payload) -> CheckoutSessionResult:
    if not isinstance(payload, dict):
        return UpstreamFailure(reason="Stripe response is not a JSON object")

    error = payload.get("error")
    # An empty error object still marks the call as rejected
    if isinstance(error, (dict, list)) or error:
        if not isinstance(error, dict):
            return ProviderRejected(message=None, error={"detail": error})
        try:
            body = StripeErrorBody.model_validate(error)
        except ValidationError:
            return ProviderRejected(message=None, error=error)
        return ProviderRejected(message=body.message, error=error)

    try:
        session = StripeCheckoutSession.model_validate(payload)
    except ValidationError as e:
        return UpstreamFailure(reason=f"Malformed checkout session: {e}")

    if not session.url:
        return UpstreamFailure(reason="Checkout session response is missing url")

    return CheckoutSessionCreated(url=session.url, session_id=session.id)
