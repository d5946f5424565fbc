import pytest

from registrar.core.errors import AgeRestriction, PaymentFailed, PrerequisiteNotMet
from registrar.core.exceptions import ResultError
from registrar.core.results import Failure, Success


@pytest.mark.parametrize("error, text", [
    (AgeRestriction(21), "Student must be at least 21 years old to enroll."),
    (PrerequisiteNotMet("CS101"), "Student has not met the prerequisite: CS101."),
    (PaymentFailed("Payment gateway error"), "Payment failed due to: Payment gateway error."),
])
def test_error_descriptions(error, text):
    assert error.description == text
    assert str(error) == text
    assert Failure(error).describe() == f"Error: {text}"


def test_success_unwraps_to_payload():
    result = Success("John Doe enrolled successfully!")
    assert result.is_success
    assert result.unwrap() == "John Doe enrolled successfully!"
    assert result.describe() == "John Doe enrolled successfully!"


def test_failure_unwrap_raises():
    result = Failure(AgeRestriction(18))
    assert not result.is_success
    with pytest.raises(ResultError) as exc_info:
        result.unwrap()
    assert exc_info.value.error_code == "UNWRAP_FAILURE"
    assert exc_info.value.details['error'] == AgeRestriction(18)
