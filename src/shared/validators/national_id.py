"""National ID (CPF) validation.

A CPF is an 11-digit document number whose last two digits are verifier
digits computed from the preceding ones:

    d1 = (sum(digit[i] * (10 - i) for i in 0..8) * 10) % 11, with 10 -> 0
    d2 = (sum(digit[i] * (11 - i) for i in 0..9) * 10) % 11, with 10 -> 0

Formatting characters (dots, hyphen, spaces) are ignored.
"""

import logging
import re

from .result import ValidationResult

logger = logging.getLogger(__name__)

NATIONAL_ID_LENGTH = 11
NON_DIGITS = re.compile(r"[^0-9]")

NATIONAL_ID_REQUIRED = "National ID is required."
NATIONAL_ID_INVALID = "Invalid national ID."
NATIONAL_ID_VALID = "Valid national ID."


def extract_digits(value: str) -> str:
    """Strip every character that is not an ASCII digit."""
    return NON_DIGITS.sub("", value)


def compute_verifier_digit(digits: str) -> int:
    """Compute the verifier digit that follows ``digits``.

    Weights run from ``len(digits) + 1`` down to 2, so the same routine yields
    the first digit (from 9 digits) and the second one (from 10 digits).

    Args:
        digits: Prefix of ASCII digits

    Returns:
        Verifier digit in the range 0-9

    """
    weight = len(digits) + 1
    total = sum(int(digit) * (weight - i) for i, digit in enumerate(digits))
    remainder = total * 10 % 11
    return 0 if remainder == 10 else remainder


def is_valid_national_id(value: str | None) -> bool:
    """Check a national ID against its verifier digits.

    Examples:
        >>> is_valid_national_id("529.982.247-25")
        True
        >>> is_valid_national_id("111.111.111-11")
        False

    """
    digits = extract_digits(value or "")
    if len(digits) != NATIONAL_ID_LENGTH:
        return False

    # Repeated-digit sequences satisfy the arithmetic but are never issued
    if len(set(digits)) == 1:
        return False

    if compute_verifier_digit(digits[:9]) != int(digits[9]):
        return False
    return compute_verifier_digit(digits[:10]) == int(digits[10])


def format_national_id(value: str | None) -> str | None:
    """Render a national ID as ``XXX.XXX.XXX-XX``.

    Returns:
        Formatted number, or None if the input does not hold exactly 11 digits

    """
    digits = extract_digits(value or "")
    if len(digits) != NATIONAL_ID_LENGTH:
        return None
    return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"


def validate_national_id(value: str | None) -> ValidationResult:
    """Validate the national ID field.

    Args:
        value: Raw national ID input, formatted or not

    Returns:
        ValidationResult for the national ID field

    """
    national_id = (value or "").strip()
    if not national_id:
        return ValidationResult.failure(NATIONAL_ID_REQUIRED)
    if not is_valid_national_id(national_id):
        logger.debug("National ID rejected by checksum")
        return ValidationResult.failure(NATIONAL_ID_INVALID)
    return ValidationResult.success(NATIONAL_ID_VALID)
