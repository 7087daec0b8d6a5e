"""Signup form domain models."""

from enum import StrEnum


class FormField(StrEnum):
    """Input slots of the signup form."""

    USERNAME = "username"
    PASSWORD = "password"
    CONFIRMATION = "confirmation"
    NATIONAL_ID = "national_id"
    PHONE = "phone"
    START_DATE = "start_date"
    END_DATE = "end_date"


class FeedbackKey(StrEnum):
    """Message slots of the signup form.

    The two date inputs share the DATES slot. GLOBAL carries the submit outcome
    and is not produced by any field validator.
    """

    USERNAME = "username"
    PASSWORD = "password"
    CONFIRMATION = "confirmation"
    NATIONAL_ID = "national_id"
    PHONE = "phone"
    DATES = "dates"
    GLOBAL = "global"


FIELD_KEYS: tuple[FeedbackKey, ...] = (
    FeedbackKey.USERNAME,
    FeedbackKey.PASSWORD,
    FeedbackKey.CONFIRMATION,
    FeedbackKey.NATIONAL_ID,
    FeedbackKey.PHONE,
    FeedbackKey.DATES,
)
