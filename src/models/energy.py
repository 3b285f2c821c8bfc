"""
Pydantic data models for energy price records and cache entries.
Field names follow the Zonneplan API payload (snake_case).
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from src.exceptions import InvalidArgumentError

PRICE_KEY = "total_price_tax_included"
SUSTAINABILITY_KEY = "sustainability_score"
PRICE_RANK_KEY = "rank_total_price"
SUSTAINABILITY_RANK_KEY = "rank_sustainability_score"


class EnergyType(str, Enum):
    """Energy products served by the upstream provider."""
    ELECTRICITY = "electricity"
    GAS = "gas"


def parse_energy_type(energy_type: Union[str, EnergyType]) -> EnergyType:
    """Convert a type name into an EnergyType, rejecting unknown values."""
    try:
        return EnergyType(energy_type)
    except ValueError:
        raise InvalidArgumentError(f"Invalid type provided: {energy_type}")


class EnergyRecord(BaseModel):
    """
    A single upstream price data point.

    Unknown upstream fields (timestamps, tariff parts, ...) are kept so the
    cached file carries the full entry. Records are immutable; ranking
    produces updated copies.
    """
    model_config = ConfigDict(extra="allow", frozen=True)

    total_price_tax_included: float = Field(
        description="Total price including taxes"
    )
    sustainability_score: Optional[float] = Field(
        default=None,
        description="Sustainability score, electricity only"
    )
    rank_total_price: Optional[int] = Field(
        default=None,
        description="1-based rank by price, cheapest first"
    )
    rank_sustainability_score: Optional[int] = Field(
        default=None,
        description="1-based rank by sustainability, most sustainable first"
    )


class RecordSummary(BaseModel):
    """
    Extremal records of a ranked set: cheapest, most expensive and, for
    electricity, most sustainable.
    """
    price_low: EnergyRecord
    price_high: EnergyRecord
    sustainability_high: Optional[EnergyRecord] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "price_low": self.price_low.model_dump(),
            "price_high": self.price_high.model_dump(),
        }
        if self.sustainability_high is not None:
            result["sustainability_high"] = self.sustainability_high.model_dump()
        return result


class CacheEntry(BaseModel):
    """The object persisted per (type, date): summary plus the full ranked set."""
    records: RecordSummary
    data: List[EnergyRecord]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "records": self.records.to_dict(),
            "data": [record.model_dump() for record in self.data],
        }


class FetchStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"


class ProviderResult(BaseModel):
    """
    Outcome of a provider fetch. "No data for this date" is a normal result,
    not an exception; transport failures are still raised.
    """
    status: FetchStatus
    energy_type: EnergyType
    date: Optional[str] = None
    records: List[Dict[str, Any]] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.status == FetchStatus.EMPTY
