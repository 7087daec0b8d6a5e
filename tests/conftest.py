"""Test configuration and fixtures.

Validators are pure functions, so most tests need no setup. The fixtures here
provide a recording message sink and a form snapshot that passes every rule.
"""

import pytest

from src.features.signup.schemas import SignupFormInput
from src.features.signup.service import SignupFormService
from src.shared.feedback.sink import InMemoryMessageSink

# Well-known CPF test vector with correct verifier digits
VALID_NATIONAL_ID = "529.982.247-25"


@pytest.fixture
def sink() -> InMemoryMessageSink:
    """Create an empty in-memory sink per test."""
    return InMemoryMessageSink()


@pytest.fixture
def service(sink: InMemoryMessageSink) -> SignupFormService:
    """Create a signup form service reporting to the test sink."""
    return SignupFormService(sink, symbol_policy="non_alphanumeric")


@pytest.fixture
def valid_form() -> SignupFormInput:
    """Create a form snapshot where every field is valid."""
    return SignupFormInput(
        username="john_doe",
        password="Secure@Pass123",
        confirmation="Secure@Pass123",
        national_id=VALID_NATIONAL_ID,
        phone="(19) 98888-7777",
        start_date="2024-01-05",
        end_date="2024-01-10",
    )
