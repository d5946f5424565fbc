"""
Core interfaces and abstract base classes for the Registrar package.
"""

import random
from abc import ABC, abstractmethod
from typing import Optional


class PaymentDecider(ABC):
    """Interface for the collaborator that approves or declines a payment."""

    @abstractmethod
    def decide(self) -> bool:
        """Return True when the payment goes through."""
        pass


class RandomPaymentDecider(PaymentDecider):
    """Approves or declines with equal probability."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def decide(self) -> bool:
        return self._rng.random() < 0.5
