"""
Tagged success/failure results for enrollment and payment steps.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .errors import EnrollmentError
from .exceptions import ResultError


T = TypeVar('T')
E = TypeVar('E', bound=EnrollmentError)


@dataclass(frozen=True)
class Success(Generic[T]):
    """A step that completed, carrying its payload."""
    value: T

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def describe(self) -> str:
        """Line printed for this outcome."""
        return str(self.value)


@dataclass(frozen=True)
class Failure(Generic[E]):
    """A step that was rejected, carrying the typed reason."""
    error: E

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self):
        raise ResultError(
            f"Called unwrap() on a failure: {self.error.description}",
            error_code="UNWRAP_FAILURE",
            details={'error': self.error},
        )

    def describe(self) -> str:
        return f"Error: {self.error.description}"


Result = Union[Success[T], Failure[E]]
