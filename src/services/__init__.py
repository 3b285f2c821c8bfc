"""
Services package for the Energy Price API.
Contains the upstream client, provider, ranking engine and orchestrating price service.
"""

from .energy_provider import ZonneplanProvider
from .http_client import UpstreamClient
from .price_service import PriceService

__all__ = [
    "PriceService",
    "UpstreamClient",
    "ZonneplanProvider",
]
