from __future__ import annotations

import pytest

from lawnboss.core.exceptions import ValidationError
from lawnboss.utils.ids import generate_invoice_number
from lawnboss.utils.validators import is_valid_email, optional_number, require_fields, round_money, sanitize_text


def test_sanitize_text_strips_nulls_and_whitespace():
    assert sanitize_text("  hello\x00 ") == "hello"
    assert sanitize_text(None) == ""


def test_email_validation():
    assert is_valid_email("pat@example.com") is True
    assert is_valid_email("not-an-email") is False
    assert is_valid_email(None) is False


def test_require_fields_lists_missing_names():
    with pytest.raises(ValidationError, match="Missing required fields: city, zip_code"):
        require_fields({"city": " ", "state": "TX"}, ("city", "state", "zip_code"))


def test_optional_number():
    assert optional_number("", "Lawn size") is None
    assert optional_number("1200.5", "Lawn size") == 1200.5
    with pytest.raises(ValidationError, match="Lawn size must be a number"):
        optional_number("big", "Lawn size")


def test_round_money_rounds_half_up():
    assert round_money(2.675) == 2.68
    assert round_money(0.005) == 0.01
    assert round_money(None) == 0.0


def test_invoice_number_uses_epoch_millis():
    assert generate_invoice_number(1760000000123) == "INV-1760000000123"
    assert generate_invoice_number().startswith("INV-")
