"""Phone number validation functions."""

import re

from .result import ValidationResult

# Optional 2-digit area code, bare or parenthesized, then a 4 or 5 digit
# prefix, an optional hyphen and a 4 digit suffix: "(19) 98888-7777"
PHONE_PATTERN = re.compile(r"(\(?[0-9]{2}\)?\s?)?([0-9]{4,5})-?[0-9]{4}")

PHONE_REQUIRED = "Phone number is required."
PHONE_INVALID = "Invalid phone number."
PHONE_VALID = "Valid phone number."


def validate_phone(value: str | None) -> ValidationResult:
    """Validate a phone number.

    Args:
        value: Raw phone input; surrounding whitespace is ignored

    Returns:
        ValidationResult for the phone field

    Examples:
        >>> validate_phone("(19) 98888-7777").valid
        True
        >>> validate_phone("123").valid
        False

    """
    phone = (value or "").strip()
    if not phone:
        return ValidationResult.failure(PHONE_REQUIRED)
    if not PHONE_PATTERN.fullmatch(phone):
        return ValidationResult.failure(PHONE_INVALID)
    return ValidationResult.success(PHONE_VALID)
