"""Password validation functions."""

import logging
from typing import Literal

from src.config.settings import settings

from .result import ValidationResult

logger = logging.getLogger(__name__)

SymbolPolicy = Literal["non_alphanumeric", "punctuation"]

PASSWORD_MIN_LENGTH = 8
PUNCTUATION_SYMBOLS = frozenset("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?")

PASSWORD_REQUIRED = "Password is required."
PASSWORD_WEAK = "Weak password."
PASSWORD_STRONG = "Strong password."


def _is_ascii_lower(char: str) -> bool:
    return "a" <= char <= "z"


def _is_ascii_upper(char: str) -> bool:
    return "A" <= char <= "Z"


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_symbol(char: str, symbol_policy: SymbolPolicy = "non_alphanumeric") -> bool:
    """Check whether a character counts as a password symbol.

    Args:
        char: Single character to classify
        symbol_policy: ``non_alphanumeric`` accepts anything outside
            ``[A-Za-z0-9]`` (whitespace included); ``punctuation`` accepts
            only the enumerated ``PUNCTUATION_SYMBOLS`` set

    Returns:
        True if the character satisfies the symbol requirement.

    """
    if symbol_policy == "punctuation":
        return char in PUNCTUATION_SYMBOLS
    return not (_is_ascii_lower(char) or _is_ascii_upper(char) or _is_ascii_digit(char))


def password_strength_issues(password: str, symbol_policy: SymbolPolicy | None = None) -> list[str]:
    """List the strength requirements a password fails.

    Requirements:
    - At least 8 characters
    - At least one lowercase letter (a-z)
    - At least one uppercase letter (A-Z)
    - At least one digit (0-9)
    - At least one symbol, as defined by ``symbol_policy``

    Args:
        password: Password string to inspect
        symbol_policy: Symbol definition; defaults to the configured policy

    Returns:
        Names of the failed checks, empty when the password is strong

    Examples:
        >>> password_strength_issues("Secure@Pass123")
        []
        >>> password_strength_issues("weakpass")
        ['uppercase', 'digit', 'symbol']

    """
    if symbol_policy is None:
        symbol_policy = settings.password_symbol_policy

    issues = []
    if len(password) < PASSWORD_MIN_LENGTH:
        issues.append("length")
    if not any(_is_ascii_lower(c) for c in password):
        issues.append("lowercase")
    if not any(_is_ascii_upper(c) for c in password):
        issues.append("uppercase")
    if not any(_is_ascii_digit(c) for c in password):
        issues.append("digit")
    if not any(is_symbol(c, symbol_policy) for c in password):
        issues.append("symbol")
    return issues


def validate_password(value: str | None, symbol_policy: SymbolPolicy | None = None) -> ValidationResult:
    """Validate password strength.

    The password is not trimmed: whitespace is part of the secret.

    Args:
        value: Raw password input
        symbol_policy: Symbol definition; defaults to the configured policy

    Returns:
        ValidationResult for the password field

    """
    password = value or ""
    if not password:
        return ValidationResult.failure(PASSWORD_REQUIRED)

    issues = password_strength_issues(password, symbol_policy)
    if issues:
        logger.debug(f"Password rejected, failed checks: {', '.join(issues)}")
        return ValidationResult.failure(PASSWORD_WEAK)
    return ValidationResult.success(PASSWORD_STRONG)
