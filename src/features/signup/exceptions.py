"""Signup form exceptions."""


class SignupFormException(Exception):
    """Base signup form exception."""

    def __init__(self, detail: str = "Signup form operation failed"):
        self.detail = detail
        super().__init__(detail)


class UnknownFieldError(SignupFormException):
    """Raised when a change event names a field the form does not have."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(detail=f"Unknown form field '{field}'")


class SubmissionRejectedError(SignupFormException):
    """Raised when a rejected submission is forced to fail."""

    def __init__(self, failed_fields: list[str]):
        self.failed_fields = failed_fields
        fields_str = ", ".join(failed_fields)
        super().__init__(detail=f"Submission rejected, invalid field(s): {fields_str}")
