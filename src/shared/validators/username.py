"""Username validation functions."""

import re

from .result import ValidationResult

USERNAME_PATTERN = re.compile(r"[A-Za-z0-9_]{3,}")

USERNAME_REQUIRED = "Username is required."
USERNAME_INVALID = "Invalid username."
USERNAME_VALID = "Valid username."


def validate_username(value: str | None) -> ValidationResult:
    """Validate a username.

    Surrounding whitespace is ignored. The remaining text must be at least
    three characters drawn from ASCII letters, digits and underscore.

    Args:
        value: Raw username input

    Returns:
        ValidationResult for the username field

    Examples:
        >>> validate_username("  john_doe ").valid
        True
        >>> validate_username("jo").message
        'Invalid username.'

    """
    username = (value or "").strip()
    if not username:
        return ValidationResult.failure(USERNAME_REQUIRED)
    if not USERNAME_PATTERN.fullmatch(username):
        return ValidationResult.failure(USERNAME_INVALID)
    return ValidationResult.success(USERNAME_VALID)
