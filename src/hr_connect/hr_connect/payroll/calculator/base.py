from __future__ import annotations

import math
from abc import ABC, abstractmethod

from ..model import OTResult, PayrollInputs


def round_half_up(value: float) -> int:
    """Round to the nearest integer currency unit, halves upward."""
    return int(math.floor(value + 0.5))


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def overtime(self, inputs: PayrollInputs) -> OTResult:
        raise NotImplementedError
