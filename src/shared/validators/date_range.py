"""Date range validation functions."""

import re
from datetime import date

from pydantic import BaseModel, ConfigDict

from .result import ValidationResult

ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

DATES_REQUIRED = "Both dates are required."
DATES_INVALID = "Invalid date."
DATES_OUT_OF_ORDER = "Start date is after end date."
DATES_VALID = "Valid dates."


class DateRange(BaseModel):
    """Calendar date interval with ``start <= end`` when valid."""

    model_config = ConfigDict(frozen=True)

    start: date
    end: date

    @property
    def is_ordered(self) -> bool:
        return self.start <= self.end


def parse_iso_date(value: str) -> date | None:
    """Parse a strict ``YYYY-MM-DD`` date.

    Only the calendar date is considered; there is no time-of-day or timezone.

    Returns:
        The parsed date, or None when the text is not a real calendar date

    """
    if not ISO_DATE_PATTERN.fullmatch(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def validate_date_range(start: str | None, end: str | None) -> ValidationResult:
    """Validate a start/end date pair.

    Args:
        start: Start date in ``YYYY-MM-DD`` form
        end: End date in ``YYYY-MM-DD`` form

    Returns:
        ValidationResult for the date range

    Examples:
        >>> validate_date_range("2024-01-05", "2024-01-10").valid
        True
        >>> validate_date_range("2024-01-10", "2024-01-05").message
        'Start date is after end date.'

    """
    start = start or ""
    end = end or ""
    if not start or not end:
        return ValidationResult.failure(DATES_REQUIRED)

    start_date = parse_iso_date(start)
    end_date = parse_iso_date(end)
    if start_date is None or end_date is None:
        return ValidationResult.failure(DATES_INVALID)

    if not DateRange(start=start_date, end=end_date).is_ordered:
        return ValidationResult.failure(DATES_OUT_OF_ORDER)
    return ValidationResult.success(DATES_VALID)
