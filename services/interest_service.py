from dataclasses import replace
from datetime import datetime
from typing import Optional

from models.interest import CompoundingFrequency, InterestCalculation, InterestType
from services.data_manager import DataManager


class InterestService:
    def __init__(self, data_manager: DataManager):
        self._data = data_manager

    @staticmethod
    def calculate(
        principal: float,
        rate: float,
        time: float,
        interest_type: InterestType,
        compounding_frequency: Optional[CompoundingFrequency] = None,
        name: str = "",
    ) -> InterestCalculation:
        """Build an unsaved calculation from user input."""
        if principal <= 0:
            raise ValueError("Principal must be greater than zero.")
        if rate < 0:
            raise ValueError("Interest rate cannot be negative.")
        if time <= 0:
            raise ValueError("Time period must be greater than zero.")

        if interest_type == InterestType.SIMPLE:
            compounding_frequency = None
        elif compounding_frequency is None:
            compounding_frequency = CompoundingFrequency.MONTHLY

        name = name.strip() or f"Calculation {datetime.now().strftime('%b %d, %Y %H:%M')}"
        return InterestCalculation(
            name=name,
            principal=principal,
            rate=rate,
            time=time,
            interest_type=interest_type,
            compounding_frequency=compounding_frequency,
        )

    def save(self, calculation: InterestCalculation, name: str = "") -> InterestCalculation:
        if name.strip():
            calculation = replace(calculation, name=name.strip())
        self._data.add_interest_calculation(calculation)
        return calculation

    def delete(self, calculation_id: str):
        self._data.delete_interest_calculation(calculation_id)

    def history(self) -> list[InterestCalculation]:
        """Saved calculations, newest first."""
        return sorted(self._data.interest_calculations, key=lambda c: c.created_at, reverse=True)
