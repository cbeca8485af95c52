import logging

from clients.stripe_client import StripeCheckoutClient
from models.checkout import (
    CheckoutSessionDescriptor,
    CheckoutSessionResult,
    LineItem,
    PriceData,
    ProductData,
    Recurring,
)
from models.donation import DonationRequest

logger = logging.getLogger(__name__)

SUCCESS_PATH = "/donate-success.html"
CANCEL_PATH = "/donate.html"


class CheckoutService:
    def __init__(
        self,
        client: StripeCheckoutClient,
        currency: str = "usd",
        organization_name: str = "Shaarei Avodah"
    ):
        self.client = client
        self.currency = currency
        self.organization_name = organization_name

    def _product(self, donation: DonationRequest) -> ProductData:
        if donation.is_recurring:
            return ProductData(
                name=f"Monthly Donation to {self.organization_name}",
                description="Thank you for your ongoing support!"
            )
        return ProductData(
            name=f"One-Time Donation to {self.organization_name}",
            description="Thank you for your generous support!"
        )

    def build_descriptor(self, donation: DonationRequest, base_url: str) -> CheckoutSessionDescriptor:
        base_url = base_url.rstrip("/")

        price_data = PriceData(
            currency=self.currency,
            product_data=self._product(donation),
            unit_amount=donation.amount_minor_units,
            recurring=Recurring(interval="month") if donation.is_recurring else None
        )

        return CheckoutSessionDescriptor(
            mode="subscription" if donation.is_recurring else "payment",
            line_items=[LineItem(price_data=price_data, quantity=1)],
            success_url=f"{base_url}{SUCCESS_PATH}?type={donation.type}",
            cancel_url=f"{base_url}{CANCEL_PATH}"
        )

    async def create_checkout_session(
        self, donation: DonationRequest, base_url: str
    ) -> CheckoutSessionResult:
        descriptor = self.build_descriptor(donation, base_url)
        logger.info(
            f"Creating {descriptor.mode} checkout session for "
            f"{descriptor.line_items[0].price_data.unit_amount} {self.currency}"
        )
        return await self.client.create_checkout_session(descriptor)
