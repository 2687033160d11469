from __future__ import annotations

from record_dashboard.services.validation_service import (
    validate_contact_payload,
    validate_min_length,
    validate_required,
)


def _payload(**overrides):
    payload = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "company": "Analytical Engines",
        "email": "ada@example.com",
        "area_code": "020",
        "phone_number": "1234567",
        "message": "  Hello there  ",
    }
    payload.update(overrides)
    return payload


def test_valid_payload_is_normalized():
    valid, errors, normalized = validate_contact_payload(_payload())
    assert valid
    assert errors == {}
    assert normalized["message"] == "Hello there"


def test_missing_fields_are_reported_individually():
    valid, errors, _ = validate_contact_payload(_payload(first_name="", company="   ", message=None))
    assert not valid
    assert set(errors) == {"first_name", "company", "message"}
    assert errors["first_name"] == "First Name is required."


def test_last_name_minimum_length():
    valid, errors, _ = validate_contact_payload(_payload(last_name="L"))
    assert not valid
    assert errors == {"last_name": "Last Name must be at least 2 characters."}


def test_invalid_email():
    for email in ("ada", "ada@example", "ada@@example.com", "ada@example.c"):
        valid, errors, _ = validate_contact_payload(_payload(email=email))
        assert not valid
        assert errors["email"] == "Invalid email address"


def test_area_code_must_be_three_digits():
    for area_code in ("02", "0201", "abc"):
        _, errors, _ = validate_contact_payload(_payload(area_code=area_code))
        assert errors["area_code"] == "Invalid Area Code"


def test_phone_number_up_to_eight_digits():
    _, errors, _ = validate_contact_payload(_payload(phone_number="12345678"))
    assert "phone_number" not in errors

    for phone_number in ("123456789", "12-34", "phone"):
        _, errors, _ = validate_contact_payload(_payload(phone_number=phone_number))
        assert errors["phone_number"] == "Invalid Phone Number"


def test_field_helpers():
    assert validate_required("  x ", "Field") == (True, "", "x")
    assert validate_required("", "Field") == (False, "Field is required.", "")
    assert validate_min_length("", "Field", 2) == (False, "Field is required.", "")
