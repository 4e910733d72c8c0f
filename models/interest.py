from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from models.expense import new_id
from utils.date_helpers import now


class InterestType(str, Enum):
    SIMPLE = "Simple Interest"
    COMPOUND = "Compound Interest"


class CompoundingFrequency(str, Enum):
    DAILY = "Daily"
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"
    SEMI_ANNUALLY = "Semi-Annually"
    ANNUALLY = "Annually"

    @property
    def periods_per_year(self) -> float:
        return PERIODS_PER_YEAR[self]


PERIODS_PER_YEAR = {
    CompoundingFrequency.DAILY: 365.0,
    CompoundingFrequency.MONTHLY: 12.0,
    CompoundingFrequency.QUARTERLY: 4.0,
    CompoundingFrequency.SEMI_ANNUALLY: 2.0,
    CompoundingFrequency.ANNUALLY: 1.0,
}


@dataclass
class InterestCalculation:
    name: str
    principal: float
    rate: float         # annual, percent (5.0 == 5%)
    time: float         # years
    interest_type: InterestType
    compounding_frequency: Optional[CompoundingFrequency] = None
    created_at: datetime = field(default_factory=now)
    id: str = field(default_factory=new_id)

    @property
    def interest_amount(self) -> float:
        if self.interest_type == InterestType.SIMPLE:
            return self._simple_interest()
        return self._compound_interest()

    @property
    def total_amount(self) -> float:
        return self.principal + self.interest_amount

    def _simple_interest(self) -> float:
        return self.principal * (self.rate / 100) * self.time

    def _compound_interest(self) -> float:
        if self.compounding_frequency is None:
            return 0.0
        n = self.compounding_frequency.periods_per_year
        amount = self.principal * (1 + (self.rate / 100) / n) ** (n * self.time)
        return amount - self.principal
