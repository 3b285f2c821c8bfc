"""
Energy Price API - Zonneplan price cache

A small service that fetches electricity and gas prices from Zonneplan, ranks
them by price and sustainability, and caches one JSON file per type and date.

Main components:
- Upstream client with retry and a provider that validates requests
- Ranking engine for filtering, ranking and low/high extraction
- File-backed cache keyed by energy type and date
- Domain exceptions for clear error handling
"""

__version__ = "1.0.0"
