"""Validation outcome shared by every field validator."""

from pydantic import BaseModel, ConfigDict


class ValidationResult(BaseModel):
    """Outcome of a single field validation.

    ``message`` is empty only for a pending result (no validation has run yet).
    Both valid and invalid outcomes carry a human-readable message.

    Examples:
        >>> ValidationResult.success("Valid username.").valid
        True
        >>> bool(ValidationResult.failure("Invalid username."))
        False

    """

    model_config = ConfigDict(frozen=True)

    valid: bool = False
    message: str = ""

    @classmethod
    def success(cls, message: str) -> "ValidationResult":
        """Build a passing result."""
        return cls(valid=True, message=message)

    @classmethod
    def failure(cls, message: str) -> "ValidationResult":
        """Build a failing result."""
        return cls(valid=False, message=message)

    @classmethod
    def pending(cls) -> "ValidationResult":
        """Build the result for a field that has not been validated yet."""
        return cls()

    def __bool__(self) -> bool:
        return self.valid
