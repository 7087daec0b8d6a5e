"""Password confirmation validation."""

from .result import ValidationResult

CONFIRMATION_REQUIRED = "Please confirm the password."
CONFIRMATION_MISMATCH = "Passwords don't match."
CONFIRMATION_MATCH = "Passwords match."


def validate_confirmation(password: str | None, confirmation: str | None) -> ValidationResult:
    """Validate that the confirmation repeats the password exactly.

    Comparison is case-sensitive and neither value is trimmed.

    Args:
        password: Current password input
        confirmation: Current confirmation input

    Returns:
        ValidationResult for the confirmation field

    """
    confirmation = confirmation or ""
    if not confirmation:
        return ValidationResult.failure(CONFIRMATION_REQUIRED)
    if (password or "") != confirmation:
        return ValidationResult.failure(CONFIRMATION_MISMATCH)
    return ValidationResult.success(CONFIRMATION_MATCH)
