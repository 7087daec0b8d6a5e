"""Signup form schemas (DTOs)."""

from pydantic import BaseModel, ConfigDict, field_validator

from src.shared.validators.result import ValidationResult

from .exceptions import SubmissionRejectedError
from .models import FeedbackKey


class SignupFormInput(BaseModel):
    """Snapshot of the current values of every input slot.

    Values are kept exactly as typed; each validator decides whether to trim.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    username: str = ""
    password: str = ""
    confirmation: str = ""
    national_id: str = ""
    phone: str = ""
    start_date: str = ""
    end_date: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def missing_as_empty(cls, value):
        """Treat an absent value as an empty string."""
        return "" if value is None else value


class SubmissionReport(BaseModel):
    """Outcome of a submit attempt."""

    model_config = ConfigDict(frozen=True)

    accepted: bool
    message: str
    results: dict[FeedbackKey, ValidationResult]

    @property
    def failed_fields(self) -> list[FeedbackKey]:
        """Feedback keys whose validator reported invalid."""
        return [key for key, result in self.results.items() if not result.valid]

    def raise_for_rejection(self) -> None:
        """Raise SubmissionRejectedError if the submission was not accepted."""
        if not self.accepted:
            raise SubmissionRejectedError([str(key) for key in self.failed_fields])
