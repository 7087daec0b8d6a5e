"""Message sink contract for per-field feedback.

A sink receives ``report(field_key, message, is_success)`` calls and owns the
displayed state. An empty message clears the field; a non-empty message is
shown in exactly one state. Every call overwrites the previous one for that
field, so repeated reports are idempotent.
"""

import logging
from enum import StrEnum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from src.shared.validators.result import ValidationResult

logger = logging.getLogger(__name__)


class FeedbackState(StrEnum):
    """Display state paired with a non-empty message."""

    SUCCESS = "ok"
    ERROR = "error"


class FieldFeedback(BaseModel):
    """Message currently displayed for a field."""

    model_config = ConfigDict(frozen=True)

    message: str
    state: FeedbackState


@runtime_checkable
class MessageSink(Protocol):
    """Presentation-side receiver of validation feedback."""

    def report(self, field_key: str, message: str, is_success: bool = False) -> None: ...


class InMemoryMessageSink:
    """Sink that keeps the displayed feedback in a dict keyed by field."""

    def __init__(self) -> None:
        self.displayed: dict[str, FieldFeedback] = {}

    def report(self, field_key: str, message: str, is_success: bool = False) -> None:
        if not message:
            self.displayed.pop(field_key, None)
            return
        state = FeedbackState.SUCCESS if is_success else FeedbackState.ERROR
        self.displayed[field_key] = FieldFeedback(message=message, state=state)

    def get(self, field_key: str) -> FieldFeedback | None:
        """Return the feedback shown for a field, or None when it is clear."""
        return self.displayed.get(field_key)


class LoggingMessageSink:
    """Sink that writes every report to the log."""

    def report(self, field_key: str, message: str, is_success: bool = False) -> None:
        if not message:
            logger.debug(f"Feedback cleared for {field_key}")
        elif is_success:
            logger.info(f"{field_key}: {message}")
        else:
            logger.warning(f"{field_key}: {message}")


def publish_result(sink: MessageSink, field_key: str, result: ValidationResult) -> None:
    """Report a validation result to a sink."""
    sink.report(field_key, result.message, result.valid)


def clear_field(sink: MessageSink, field_key: str) -> None:
    """Clear any feedback displayed for a field."""
    sink.report(field_key, "", False)
