"""
Data models package for the Energy Price API.
Contains Pydantic models for energy records, summaries and cache entries.
"""

from .energy import (
    CacheEntry,
    EnergyRecord,
    EnergyType,
    FetchStatus,
    ProviderResult,
    RecordSummary,
)

__all__ = [
    "CacheEntry",
    "EnergyRecord",
    "EnergyType",
    "FetchStatus",
    "ProviderResult",
    "RecordSummary",
]
