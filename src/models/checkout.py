from typing import Literal
from pydantic import BaseModel, ConfigDict


CheckoutMode = Literal["subscription", "payment"]


class ProductData(BaseModel):
    name: str
    description: str


class Recurring(BaseModel):
    interval: Literal["day", "week", "month", "year"] = "month"


class PriceData(BaseModel):
    currency: str = "usd"
    product_data: ProductData
    unit_amount: int
    recurring: Recurring | None = None


class LineItem(BaseModel):
    price_data: PriceData
    quantity: int = 1


class CheckoutSessionDescriptor(BaseModel):
    mode: CheckoutMode
    line_items: list[LineItem]
    success_url: str
    cancel_url: str

    def to_form_data(self) -> dict:
        return self.model_dump(exclude_none=True)


# Provider response bodies

class StripeErrorBody(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: str | None = None
    type: str | None = None
    code: str | None = None


class StripeCheckoutSession(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | None = None
    url: str | None = None


# Outcomes of a create-session call, mapped to HTTP responses by the router

class CheckoutSessionCreated(BaseModel):
    url: str
    session_id: str | None = None


class ProviderRejected(BaseModel):
    message: str | None = None
    error: dict = {}


class UpstreamFailure(BaseModel):
    reason: str


CheckoutSessionResult = CheckoutSessionCreated | ProviderRejected | UpstreamFailure
