import pytest

from models.donation import (
    INVALID_AMOUNT,
    INVALID_TYPE,
    InvalidDonationRequest,
    parse_donation_request,
)


def test_valid_monthly_request():
    donation = parse_donation_request({"amount": 25, "type": "monthly"})

    assert donation.amount == 25
    assert donation.type == "monthly"
    assert donation.is_recurring is True
    assert donation.amount_minor_units == 2500


def test_fractional_amount_is_rounded_to_whole_cents():
    donation = parse_donation_request({"amount": 19.99, "type": "one-time"})

    assert donation.amount_minor_units == 1999
    assert donation.is_recurring is False


@pytest.mark.parametrize("payload", [
    {"type": "monthly"},
    {"amount": 0, "type": "monthly"},
    {"amount": 0.99, "type": "one-time"},
    {"amount": -5, "type": "one-time"},
    {"amount": None, "type": "monthly"},
    {"amount": "lots", "type": "monthly"},
    {"amount": float("nan"), "type": "monthly"},
    {"amount": 1e308, "type": "one-time"},
    {"amount": 1_000_000, "type": "one-time"},
])
def test_bad_amount_is_rejected(payload):
    with pytest.raises(InvalidDonationRequest) as exc_info:
        parse_donation_request(payload)

    assert exc_info.value.message == INVALID_AMOUNT


@pytest.mark.parametrize("donation_type", [None, "", "weekly", "Monthly", 1])
def test_bad_type_is_rejected(donation_type):
    with pytest.raises(InvalidDonationRequest) as exc_info:
        parse_donation_request({"amount": 10, "type": donation_type})

    assert exc_info.value.message == INVALID_TYPE


def test_amount_error_wins_when_both_fields_are_bad():
    with pytest.raises(InvalidDonationRequest) as exc_info:
        parse_donation_request({"amount": 0, "type": "weekly"})

    assert exc_info.value.message == INVALID_AMOUNT


@pytest.mark.parametrize("payload", [[], "10", 10, None])
def test_non_object_body_is_an_invalid_amount(payload):
    with pytest.raises(InvalidDonationRequest) as exc_info:
        parse_donation_request(payload)

    assert exc_info.value.message == INVALID_AMOUNT


def test_largest_amount_stripe_accepts():
    donation = parse_donation_request({"amount": 999_999.99, "type": "one-time"})

    assert donation.amount_minor_units == 99_999_999
