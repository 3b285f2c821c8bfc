"""
Energy price service - orchestrates provider, ranking and cache.
Serves cache-or-fetch reads and the cron-triggered refresh jobs.
"""

from typing import List, Optional, Union

from src.exceptions import EmptyDatasetError
from src.logging_config import get_logger
from src.models.energy import CacheEntry, EnergyType, ProviderResult, parse_energy_type
from src.services.energy_provider import ZonneplanProvider
from src.services.ranking import extract_summary, process_electricity, process_gas
from src.storage.cache import CacheService
from src.utils.time_utils import get_current_date, get_tomorrow_date, validate_date


class PriceService:
    """Fetches, ranks and caches electricity and gas prices."""

    def __init__(
        self,
        provider: ZonneplanProvider,
        cache: CacheService,
        timezone: str = "Europe/Amsterdam",
        logger=None,
    ):
        self.provider = provider
        self.cache = cache
        self.timezone = timezone
        self.logger = logger or get_logger(__name__)

    def current_date(self) -> str:
        return get_current_date(self.timezone)

    def tomorrow_date(self) -> str:
        return get_tomorrow_date(self.timezone)

    def build_cache_entry(self, energy_type: EnergyType, raw: List[dict]) -> CacheEntry:
        """Rank the raw records and attach the low/high summary."""
        if energy_type == EnergyType.ELECTRICITY:
            data = process_electricity(raw)
        else:
            data = process_gas(raw)

        records = extract_summary(data, include_sustainability=energy_type == EnergyType.ELECTRICITY)
        return CacheEntry(records=records, data=data)

    async def get_energy_data(self, energy_type: Union[str, EnergyType], date: Optional[str] = None) -> CacheEntry:
        """
        Return the cached entry for (type, date), fetching and caching it on a miss.

        Cached entries are never refreshed here; only the cron jobs overwrite them.

        Raises:
            InvalidArgumentError: For an unknown type or an invalid date
            EmptyDatasetError: If the provider has no prices for the date
        """
        kind = parse_energy_type(energy_type)
        date = validate_date(date) if date is not None else self.current_date()

        path = self.cache.filename(kind, date)
        cached = self.cache.check_cache(path)
        if cached is not None:
            self.logger.debug("Serving energy data from cache", energy_type=kind.value, date=date)
            return cached

        result = await self.provider.fetch(kind, date)
        if result.is_empty:
            raise EmptyDatasetError("No data found for this date")

        return self._store(result, date)

    async def store_electricity_data(self) -> List[str]:
        """
        Refresh today's and tomorrow's electricity cache files.

        Stops at the first date without prices; dates handled before it stay stored.

        Raises:
            EmptyDatasetError: If either date has no prices
        """
        self.logger.info("Starting electricity data cronjob")
        stored = []

        for retrieval_date in (self.current_date(), self.tomorrow_date()):
            result = await self.provider.fetch(EnergyType.ELECTRICITY, retrieval_date)
            if result.is_empty:
                raise EmptyDatasetError(f"No data found for this date: {retrieval_date}")

            self._store(result, retrieval_date)
            stored.append(retrieval_date)

        return stored

    async def store_gas_data(self) -> List[str]:
        """Refresh today's gas cache file from the upcoming feed; an empty feed is skipped."""
        self.logger.info("Starting gas data cronjob")
        retrieval_date = self.current_date()

        # The gas feed is requested without a date and filed under today
        result = await self.provider.fetch(EnergyType.GAS)
        if result.is_empty:
            self.logger.warning("No gas data available, cache not updated", date=retrieval_date)
            return []

        self._store(result, retrieval_date)
        return [retrieval_date]

    def _store(self, result: ProviderResult, date: str) -> CacheEntry:
        entry = self.build_cache_entry(result.energy_type, result.records)
        path = self.cache.filename(result.energy_type, date)
        self.cache.save(entry, path)

        self.logger.info(
            "Stored energy data",
            energy_type=result.energy_type.value,
            date=date,
            count=len(entry.data),
            price_low=entry.records.price_low.total_price_tax_included,
            price_high=entry.records.price_high.total_price_tax_included,
        )
        return entry
