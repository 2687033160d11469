"""Validation logic for the contact form."""

from __future__ import annotations

import re
from typing import Dict, Optional, Pattern, Tuple

from record_dashboard.config import CONTACT_FIELDS, CONTACT_LABELS
from record_dashboard.utils.helpers import normalize_text

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
AREA_CODE_PATTERN = re.compile(r"^\d{3}$")
PHONE_NUMBER_PATTERN = re.compile(r"^\d{1,8}$")

MIN_LAST_NAME_LENGTH = 2


def validate_required(value: object, field_name: str) -> Tuple[bool, str, str]:
    """Validate that a field has non-blank text."""
    raw_value = normalize_text(value)
    if not raw_value:
        return False, f"{field_name} is required.", ""
    return True, "", raw_value


def validate_min_length(value: object, field_name: str, min_length: int) -> Tuple[bool, str, str]:
    valid, error, raw_value = validate_required(value, field_name)
    if not valid:
        return valid, error, raw_value
    if len(raw_value) < min_length:
        return False, f"{field_name} must be at least {min_length} characters.", ""
    return True, "", raw_value


def validate_pattern(
    value: object,
    field_name: str,
    pattern: Pattern[str],
    message: Optional[str] = None,
) -> Tuple[bool, str, str]:
    """Validate a required field against a full-match pattern."""
    valid, error, raw_value = validate_required(value, field_name)
    if not valid:
        return valid, error, raw_value
    if not pattern.fullmatch(raw_value):
        return False, message or f"Invalid {field_name}.", ""
    return True, "", raw_value


def validate_contact_payload(payload: Dict[str, object]) -> Tuple[bool, Dict[str, str], Dict[str, str]]:
    """Validate a contact submission.

    Returns ``(valid, errors, normalized)`` where ``errors`` maps each failing field
    to its message and ``normalized`` holds stripped values for every field.
    """
    checks = {
        "first_name": validate_required(payload.get("first_name"), CONTACT_LABELS["first_name"]),
        "last_name": validate_min_length(
            payload.get("last_name"),
            CONTACT_LABELS["last_name"],
            MIN_LAST_NAME_LENGTH,
        ),
        "company": validate_required(payload.get("company"), CONTACT_LABELS["company"]),
        "email": validate_pattern(
            payload.get("email"),
            CONTACT_LABELS["email"],
            EMAIL_PATTERN,
            "Invalid email address",
        ),
        "area_code": validate_pattern(
            payload.get("area_code"),
            CONTACT_LABELS["area_code"],
            AREA_CODE_PATTERN,
            "Invalid Area Code",
        ),
        "phone_number": validate_pattern(
            payload.get("phone_number"),
            CONTACT_LABELS["phone_number"],
            PHONE_NUMBER_PATTERN,
            "Invalid Phone Number",
        ),
        "message": validate_required(payload.get("message"), CONTACT_LABELS["message"]),
    }

    errors: Dict[str, str] = {}
    normalized: Dict[str, str] = {}
    for field in CONTACT_FIELDS:
        valid, error_message, value = checks[field]
        if not valid:
            errors[field] = error_message
        normalized[field] = value

    return not errors, errors, normalized
