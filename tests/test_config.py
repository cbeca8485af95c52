import pytest
from pydantic import ValidationError

from core.config import Settings


def test_defaults_without_environment():
    settings = Settings(_env_file=None)

    assert settings.STRIPE_API_BASE == "https://api.stripe.com"
    assert settings.DONATION_CURRENCY == "usd"
    assert settings.LOG_LEVEL == "INFO"


def test_log_level_is_read_case_insensitively(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", " debug ")

    assert Settings(_env_file=None).LOG_LEVEL == "DEBUG"


def test_unknown_log_level_names_the_field(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError) as exc_info:
        Settings(_env_file=None)

    assert exc_info.value.errors()[0]["loc"] == ("LOG_LEVEL",)


@pytest.mark.parametrize("timeout", ["soon", "0", "-1"])
def test_bad_stripe_timeout_is_rejected(monkeypatch, timeout):
    monkeypatch.setenv("STRIPE_TIMEOUT_SECONDS", timeout)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
