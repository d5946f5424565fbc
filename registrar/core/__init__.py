"""
Core module containing the enrollment object model.
"""

from .entities import *
from .errors import *
from .exceptions import *
from .enums import *
from .interfaces import *
from .results import *

__all__ = [
    # Entities
    "Student",
    "Course",

    # Results and errors
    "Success",
    "Failure",
    "Result",
    "EnrollmentError",
    "AgeRestriction",
    "PrerequisiteNotMet",
    "PaymentFailed",

    # Interfaces
    "PaymentDecider",
    "RandomPaymentDecider",

    # Enums
    "EnrollmentStatus",
    "PaymentMode",

    # Exceptions
    "RegistrarException",
    "ConfigurationError",
    "ResultError",
]
