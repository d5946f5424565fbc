"""
Enrollment error taxonomy.

These are plain values carried inside a ``Failure`` result, not exceptions.
Each variant renders its own human-readable description.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class EnrollmentError(ABC):
    """Base class for the reasons an enrollment step can fail."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable explanation of the failure."""
        pass

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True)
class AgeRestriction(EnrollmentError):
    """The student is younger than the course's minimum age."""
    min_age: int

    @property
    def description(self) -> str:
        return f"Student must be at least {self.min_age} years old to enroll."


@dataclass(frozen=True)
class PrerequisiteNotMet(EnrollmentError):
    """The student's ID does not carry the required prerequisite prefix."""
    prerequisite: str

    @property
    def description(self) -> str:
        return f"Student has not met the prerequisite: {self.prerequisite}."


@dataclass(frozen=True)
class PaymentFailed(EnrollmentError):
    """The payment gateway declined the payment."""
    reason: str

    @property
    def description(self) -> str:
        return f"Payment failed due to: {self.reason}."
