from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.constants import DEFAULT_REQUIRED_PERCENTAGE
from ..model import AttendanceCalculation


class AttendanceCalculator(ABC):
    """Calculator interface (Strategy Pattern for attendance figures)."""

    @abstractmethod
    def calculate(
        self,
        attended: int,
        total: int,
        required_percentage: float = DEFAULT_REQUIRED_PERCENTAGE,
    ) -> AttendanceCalculation:
        raise NotImplementedError
