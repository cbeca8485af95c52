from fastapi import APIRouter, Depends, Request
import logging

from api.responses import (
    CHECKOUT_FAILED,
    INTERNAL_ERROR,
    NOT_CONFIGURED,
    error_response,
    json_response,
)
from api.schemas import CheckoutSessionResponse, ErrorResponse
from core.dependencies import get_checkout_service
from models.checkout import CheckoutSessionCreated, ProviderRejected, UpstreamFailure
from models.donation import InvalidDonationRequest, parse_donation_request
from services.checkout_service import CheckoutService

router = APIRouter()
logger = logging.getLogger(__name__)


def request_origin(request: Request) -> str:
    return f"{request.url.scheme}://{request.url.netloc}"


@router.post(
    "/api/create-checkout",
    response_model=CheckoutSessionResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def create_checkout(
    request: Request,
    checkout_service: CheckoutService | None = Depends(get_checkout_service)
):
    """
    Creates a Stripe Checkout session for a donation and returns its URL.
    """
    if checkout_service is None:
        logger.error("STRIPE_SECRET_KEY not configured")
        return error_response(NOT_CONFIGURED, 500)

    try:
        payload = await request.json()
    except ValueError as e:
        logger.warning(f"Invalid JSON body: {e}")
        return error_response(INTERNAL_ERROR, 500)

    try:
        donation = parse_donation_request(payload)

        result = await checkout_service.create_checkout_session(
            donation, base_url=request_origin(request)
        )

        if isinstance(result, ProviderRejected):
            logger.error(f"Stripe error: {result.error}")
            return error_response(result.message or CHECKOUT_FAILED, 400)

        if isinstance(result, UpstreamFailure):
            logger.error(f"Checkout session failed: {result.reason}")
            return error_response(INTERNAL_ERROR, 500)

        if isinstance(result, CheckoutSessionCreated):
            logger.info("Created checkout session", extra={"session_id": result.session_id})
            return json_response(CheckoutSessionResponse(url=result.url).model_dump())

        logger.error(f"Unexpected checkout result: {result!r}")
        return error_response(INTERNAL_ERROR, 500)

    except InvalidDonationRequest as e:
        logger.warning(f"Rejected donation request: {e.message}")
        return error_response(e.message, 400)
    except Exception:
        logger.exception("Error creating checkout session")
        return error_response(INTERNAL_ERROR, 500)
