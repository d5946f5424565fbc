"""
Payment deciders standing in for an external payment gateway.
"""

import logging
from typing import Iterable, Optional

from ..core.enums import PaymentMode
from ..core.exceptions import ConfigurationError
from ..core.interfaces import PaymentDecider, RandomPaymentDecider


logger = logging.getLogger(__name__)


class FixedPaymentDecider(PaymentDecider):
    """Always returns the same decision."""

    def __init__(self, approve: bool = True):
        self._approve = approve

    def decide(self) -> bool:
        return self._approve


class ScriptedPaymentDecider(PaymentDecider):
    """Replays a fixed sequence of decisions, then repeats the last one."""

    def __init__(self, decisions: Iterable[bool]):
        self._decisions = list(decisions)
        if not self._decisions:
            raise ConfigurationError("ScriptedPaymentDecider needs at least one decision")
        self._position = 0

    @property
    def calls(self) -> int:
        return self._position

    def decide(self) -> bool:
        index = min(self._position, len(self._decisions) - 1)
        self._position += 1
        return self._decisions[index]


class PaymentDeciderFactory:
    """Factory for creating payment deciders."""

    @staticmethod
    def create_decider(mode: PaymentMode, seed: Optional[int] = None) -> PaymentDecider:
        """Create a payment decider for the given mode."""
        if not isinstance(mode, PaymentMode):
            try:
                mode = PaymentMode(mode)
            except ValueError:
                raise ConfigurationError(
                    f"Unsupported payment mode: {mode}",
                    error_code="UNKNOWN_PAYMENT_MODE",
                    details={'mode': mode},
                )

        logger.debug("Creating %s payment decider", mode.value)
        if mode is PaymentMode.RANDOM:
            return RandomPaymentDecider(seed)
        if mode is PaymentMode.APPROVE:
            return FixedPaymentDecider(approve=True)
        return FixedPaymentDecider(approve=False)
