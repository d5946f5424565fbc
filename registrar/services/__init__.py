"""
Services module containing enrollment orchestration and payment deciders.
"""

from .enrollment_service import EnrollmentSystem
from .payment_service import (
    RandomPaymentDecider, FixedPaymentDecider, ScriptedPaymentDecider, PaymentDeciderFactory
)

__all__ = [
    "EnrollmentSystem",
    "RandomPaymentDecider",
    "FixedPaymentDecider",
    "ScriptedPaymentDecider",
    "PaymentDeciderFactory",
]
