"""Signup form service layer.

Wires input-change events and submit actions to the field validators and
reports every outcome through a MessageSink.
"""

import logging
from collections.abc import Callable

from src.shared.feedback.sink import MessageSink, clear_field, publish_result
from src.shared.validators.confirmation import validate_confirmation
from src.shared.validators.date_range import validate_date_range
from src.shared.validators.national_id import validate_national_id
from src.shared.validators.password import SymbolPolicy, validate_password
from src.shared.validators.phone import validate_phone
from src.shared.validators.result import ValidationResult
from src.shared.validators.username import validate_username

from .exceptions import UnknownFieldError
from .models import FIELD_KEYS, FeedbackKey, FormField
from .schemas import SignupFormInput, SubmissionReport

logger = logging.getLogger(__name__)

SUBMIT_REJECTED = "Fix the errors before submitting."
SUBMIT_ACCEPTED = "Form submitted successfully!"

# Message slots refreshed when an input changes
CHANGE_DISPATCH: dict[FormField, tuple[FeedbackKey, ...]] = {
    FormField.USERNAME: (FeedbackKey.USERNAME,),
    FormField.PASSWORD: (FeedbackKey.PASSWORD,),
    FormField.CONFIRMATION: (FeedbackKey.CONFIRMATION,),
    FormField.NATIONAL_ID: (FeedbackKey.NATIONAL_ID,),
    FormField.PHONE: (FeedbackKey.PHONE,),
    FormField.START_DATE: (FeedbackKey.DATES,),
    FormField.END_DATE: (FeedbackKey.DATES,),
}


class SignupFormService:
    """Service for signup form validation."""

    def __init__(self, sink: MessageSink, symbol_policy: SymbolPolicy | None = None):
        """Initialize the service.

        Args:
            sink: Receiver of per-field and global feedback
            symbol_policy: Password symbol definition; defaults to the configured policy

        """
        self.sink = sink
        self.symbol_policy = symbol_policy
        self._validators: dict[FeedbackKey, Callable[[SignupFormInput], ValidationResult]] = {
            FeedbackKey.USERNAME: lambda data: validate_username(data.username),
            FeedbackKey.PASSWORD: lambda data: validate_password(data.password, self.symbol_policy),
            FeedbackKey.CONFIRMATION: lambda data: validate_confirmation(data.password, data.confirmation),
            FeedbackKey.NATIONAL_ID: lambda data: validate_national_id(data.national_id),
            FeedbackKey.PHONE: lambda data: validate_phone(data.phone),
            FeedbackKey.DATES: lambda data: validate_date_range(data.start_date, data.end_date),
        }

    def validate_field(self, key: FeedbackKey, data: SignupFormInput) -> ValidationResult:
        """Run the validator behind a message slot without reporting it.

        Raises:
            UnknownFieldError: If no validator produces the given slot

        """
        validator = self._validators.get(key)
        if validator is None:
            raise UnknownFieldError(str(key))
        return validator(data)

    def handle_change(self, field: FormField | str, data: SignupFormInput) -> dict[FeedbackKey, ValidationResult]:
        """Validate and report the slots affected by an input change.

        A password change also refreshes the confirmation slot once the user
        has typed a confirmation, since its outcome depends on both values.

        Args:
            field: Input slot whose value changed
            data: Current values of every input

        Returns:
            Results keyed by the message slots that were reported

        Raises:
            UnknownFieldError: If the field is not part of the form

        """
        try:
            form_field = FormField(field)
        except ValueError as exc:
            raise UnknownFieldError(str(field)) from exc

        keys = CHANGE_DISPATCH[form_field]
        if form_field == FormField.PASSWORD and data.confirmation:
            keys = (*keys, FeedbackKey.CONFIRMATION)

        results = {}
        for key in keys:
            result = self.validate_field(key, data)
            publish_result(self.sink, key, result)
            results[key] = result
        return results

    def submit(self, data: SignupFormInput) -> SubmissionReport:
        """Validate every field and decide whether the submission proceeds.

        All validators run and report, even after one fails, so the user sees
        complete feedback. The global slot is reported last.

        Args:
            data: Current values of every input

        Returns:
            SubmissionReport with the aggregate decision and per-field results

        """
        results = {key: self.validate_field(key, data) for key in FIELD_KEYS}
        for key, result in results.items():
            publish_result(self.sink, key, result)

        accepted = all(result.valid for result in results.values())
        message = SUBMIT_ACCEPTED if accepted else SUBMIT_REJECTED
        self.sink.report(FeedbackKey.GLOBAL, message, accepted)

        report = SubmissionReport(accepted=accepted, message=message, results=results)
        if accepted:
            logger.info("Signup form submission accepted")
        else:
            failed = ", ".join(report.failed_fields)
            logger.info(f"Signup form submission rejected: {failed}")
        return report

    def reset(self) -> None:
        """Clear the feedback of every slot, including the global one."""
        for key in FeedbackKey:
            clear_field(self.sink, key)
