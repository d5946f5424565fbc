"""
Enumerations and constants for the Registrar package.
"""

from enum import Enum


class EnrollmentStatus(Enum):
    """Where a student landed after a successful enrollment request."""
    ENROLLED = "enrolled"
    WAITLISTED = "waitlisted"


class PaymentMode(Enum):
    """Payment decision strategies selectable from configuration."""
    RANDOM = "random"
    APPROVE = "approve"  # Every payment succeeds
    DECLINE = "decline"  # Every payment fails


PAYMENT_GATEWAY_ERROR = "Payment gateway error"
