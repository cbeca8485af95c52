from typing import Any, Literal
from pydantic import BaseModel, Field, ValidationError


DonationType = Literal["monthly", "one-time"]

INVALID_AMOUNT = "Invalid amount"
INVALID_TYPE = "Invalid donation type"

# Stripe caps unit_amount at 99,999,999 minor units
MAX_DONATION_AMOUNT = 999_999.99


class InvalidDonationRequest(ValueError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DonationRequest(BaseModel):
    amount: float = Field(ge=1, le=MAX_DONATION_AMOUNT, allow_inf_nan=False)
    type: DonationType

    @property
    def amount_minor_units(self) -> int:
        return int(round(self.amount * 100))

    @property
    def is_recurring(self) -> bool:
        return self.type == "monthly"


def parse_donation_request(payload: Any) -> DonationRequest:
    """
    Validates a decoded JSON body.

    Anything that is not a JSON object is treated as an empty object. When
    both fields are wrong the amount error is reported.
    """
    if not isinstance(payload, dict):
        payload = {}

    try:
        return DonationRequest.model_validate(payload)
    except ValidationError as e:
        failed = {error["loc"][0] for error in e.errors() if error["loc"]}
        if "amount" in failed or not failed:
            raise InvalidDonationRequest(INVALID_AMOUNT) from e
        raise InvalidDonationRequest(INVALID_TYPE) from e
