from pydantic import BaseModel


class CheckoutSessionResponse(BaseModel):
    url: str


class ErrorResponse(BaseModel):
    error: str
