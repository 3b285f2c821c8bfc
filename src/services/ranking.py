"""
Ranking and enrichment of energy price records.
Pure functions: filter out unusable entries, assign ranks, pick extremal records.
"""

from typing import Any, Iterable, List, Mapping, Optional, Sequence

from src.exceptions import EmptyDatasetError
from src.models.energy import (
    PRICE_KEY,
    PRICE_RANK_KEY,
    SUSTAINABILITY_KEY,
    SUSTAINABILITY_RANK_KEY,
    EnergyRecord,
    RecordSummary,
)


def _value(record: Any, key: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(key)
    return getattr(record, key, None)


def filter_valid(records: Iterable[Mapping[str, Any]], key: str) -> List[Mapping[str, Any]]:
    """
    Keep only records where `key` is present and not null.

    Args:
        records: Raw upstream entries
        key: Field that must carry a value

    Returns:
        Surviving records in their original order
    """
    return [record for record in records if _value(record, key) is not None]


def rank(
    records: Sequence[EnergyRecord],
    key: str,
    rank_field: str,
    lower_is_better: bool = True,
) -> List[EnergyRecord]:
    """
    Assign a 1-based rank to every record based on the value of `key`.

    The sort is stable, so equal values keep their insertion order. Records
    with a null `key` rank after all valued records, regardless of direction.

    Args:
        records: Records to rank
        key: Field to sort on
        rank_field: Field receiving the rank
        lower_is_better: Ascending order if True, descending otherwise

    Returns:
        New records, in the same order as the input, with `rank_field` set
    """
    def sort_key(index: int):
        value = _value(records[index], key)
        if value is None:
            return (1, 0.0)
        return (0, value if lower_is_better else -value)

    order = sorted(range(len(records)), key=sort_key)

    ranks = [0] * len(records)
    for position, index in enumerate(order, start=1):
        ranks[index] = position

    return [
        record.model_copy(update={rank_field: ranks[index]})
        for index, record in enumerate(records)
    ]


def _to_records(raw: Iterable[Mapping[str, Any]]) -> List[EnergyRecord]:
    valid = filter_valid(raw, PRICE_KEY)
    return [EnergyRecord.model_validate(dict(item)) for item in valid]


def process_electricity(raw: Iterable[Mapping[str, Any]]) -> List[EnergyRecord]:
    """Drop null-priced entries, then rank by price (cheapest first) and sustainability (highest first)."""
    records = rank(_to_records(raw), PRICE_KEY, PRICE_RANK_KEY, lower_is_better=True)
    return rank(records, SUSTAINABILITY_KEY, SUSTAINABILITY_RANK_KEY, lower_is_better=False)


def process_gas(raw: Iterable[Mapping[str, Any]]) -> List[EnergyRecord]:
    """Drop null-priced entries, then rank by price (cheapest first)."""
    return rank(_to_records(raw), PRICE_KEY, PRICE_RANK_KEY, lower_is_better=True)


def extract_summary(records: Sequence[EnergyRecord], include_sustainability: bool) -> RecordSummary:
    """
    Find the cheapest and most expensive records, and optionally the most sustainable one.

    Ties go to the first record encountered.

    Raises:
        EmptyDatasetError: If `records` is empty
    """
    if not records:
        raise EmptyDatasetError("No records available to summarize")

    price_low = records[0]
    price_high = records[0]
    for record in records:
        if record.total_price_tax_included < price_low.total_price_tax_included:
            price_low = record
        if record.total_price_tax_included > price_high.total_price_tax_included:
            price_high = record

    sustainability_high: Optional[EnergyRecord] = None
    if include_sustainability:
        sustainability_high = next(
            (record for record in records if record.rank_sustainability_score == 1),
            None,
        )

    return RecordSummary(
        price_low=price_low,
        price_high=price_high,
        sustainability_high=sustainability_high,
    )
