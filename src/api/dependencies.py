"""
FastAPI dependency providers.
Each request gets components built from the current settings.
"""

from fastapi import Depends

from src.config import Settings, get_settings
from src.services.energy_provider import ZonneplanProvider
from src.services.http_client import UpstreamClient
from src.services.price_service import PriceService
from src.storage.cache import CacheService


def get_upstream_client(settings: Settings = Depends(get_settings)) -> UpstreamClient:
    return UpstreamClient(
        base_url=settings.zonneplan_api_base_url,
        secret=settings.zonneplan_api_secret,
        timeout=settings.upstream_timeout_seconds,
        max_attempts=settings.upstream_max_attempts,
        backoff_seconds=settings.upstream_backoff_seconds,
    )


def get_energy_provider(
    client: UpstreamClient = Depends(get_upstream_client),
    settings: Settings = Depends(get_settings),
) -> ZonneplanProvider:
    return ZonneplanProvider(
        client,
        electricity_endpoint=settings.electricity_endpoint,
        gas_endpoint=settings.gas_endpoint,
    )


def get_cache_service(settings: Settings = Depends(get_settings)) -> CacheService:
    return CacheService(settings.data_dir)


def get_price_service(
    provider: ZonneplanProvider = Depends(get_energy_provider),
    cache: CacheService = Depends(get_cache_service),
    settings: Settings = Depends(get_settings),
) -> PriceService:
    return PriceService(provider, cache, timezone=settings.timezone)
