from database.collection_dao import CollectionDAO
from models.interest import CompoundingFrequency, InterestCalculation, InterestType
from utils.constants import INTEREST_CALCULATIONS_KEY
from utils.date_helpers import format_datetime, parse_datetime


class InterestDAO(CollectionDAO[InterestCalculation]):
    key = INTEREST_CALCULATIONS_KEY

    def _model_to_record(self, c: InterestCalculation) -> dict:
        return {
            "id": c.id,
            "name": c.name,
            "principal": float(c.principal),
            "rate": float(c.rate),
            "time": float(c.time),
            "interest_type": c.interest_type.value,
            "compounding_frequency": c.compounding_frequency.value if c.compounding_frequency else None,
            "created_at": format_datetime(c.created_at),
        }

    def _record_to_model(self, r: dict) -> InterestCalculation:
        frequency = r.get("compounding_frequency")
        return InterestCalculation(
            id=r["id"],
            name=r["name"],
            principal=float(r["principal"]),
            rate=float(r["rate"]),
            time=float(r["time"]),
            interest_type=InterestType(r["interest_type"]),
            compounding_frequency=CompoundingFrequency(frequency) if frequency else None,
            created_at=parse_datetime(r["created_at"]),
        )
