"""
Unit tests for the price service.
Tests the cache-or-fetch flow and the cron refresh jobs.
"""

from unittest.mock import AsyncMock

import pytest

from src.exceptions import (
    CacheCorruptionError,
    EmptyDatasetError,
    FetchError,
    InvalidArgumentError,
)
from src.models.energy import CacheEntry, EnergyType, FetchStatus, ProviderResult
from src.services.price_service import PriceService


def _ok(energy_type, payload, date=None):
    return ProviderResult(status=FetchStatus.OK, energy_type=energy_type, date=date, records=payload["data"])


def _empty(energy_type, date=None):
    return ProviderResult(status=FetchStatus.EMPTY, energy_type=energy_type, date=date)


class TestPriceService:
    """Tests for PriceService."""

    @pytest.fixture
    def provider(self):
        return AsyncMock()

    @pytest.fixture
    def price_service(self, provider, cache_service):
        """Create a PriceService with a mocked provider and a temporary cache."""
        service = PriceService(provider, cache_service)
        service.current_date = lambda: "2025-06-01"
        service.tomorrow_date = lambda: "2025-06-02"
        return service

    @pytest.mark.asyncio
    async def test_cache_miss_fetches_and_saves(self, price_service, provider, cache_service, electricity_payload):
        """A miss fetches, ranks, summarises and writes the cache file."""
        provider.fetch.return_value = _ok(EnergyType.ELECTRICITY, electricity_payload, "2025-06-01")

        entry = await price_service.get_energy_data("electricity", "2025-06-01")

        assert isinstance(entry, CacheEntry)
        assert len(entry.data) == 4
        assert entry.records.price_low.total_price_tax_included == 0.18
        assert entry.records.price_high.total_price_tax_included == 0.31
        assert entry.records.sustainability_high.sustainability_score == 75.0
        provider.fetch.assert_awaited_once_with(EnergyType.ELECTRICITY, "2025-06-01")
        assert cache_service.check_cache(cache_service.filename("electricity", "2025-06-01")) == entry

    @pytest.mark.asyncio
    async def test_cache_hit_skips_provider(self, price_service, provider, cache_service, gas_payload):
        """A hit is served from disk without calling the provider."""
        stored = price_service.build_cache_entry(EnergyType.GAS, gas_payload["data"])
        cache_service.save(stored, cache_service.filename("gas", "2025-06-01"))

        entry = await price_service.get_energy_data("gas", "2025-06-01")

        assert entry == stored
        provider.fetch.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_date_defaults_to_today(self, price_service, provider, gas_payload):
        """Without a date the current date is used."""
        provider.fetch.return_value = _ok(EnergyType.GAS, gas_payload)

        await price_service.get_energy_data("gas")

        provider.fetch.assert_awaited_once_with(EnergyType.GAS, "2025-06-01")

    @pytest.mark.asyncio
    async def test_empty_upstream(self, price_service, provider, cache_service):
        """An empty upstream raises EmptyDatasetError and writes nothing."""
        provider.fetch.return_value = _empty(EnergyType.GAS, "2025-06-01")

        with pytest.raises(EmptyDatasetError):
            await price_service.get_energy_data("gas", "2025-06-01")

        assert not cache_service.filename("gas", "2025-06-01").exists()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("date", ["../../etc/passwd", "2025-02-30"])
    async def test_invalid_date_rejected_before_cache(self, price_service, provider, date):
        """Dates are validated before they become part of a path."""
        with pytest.raises(InvalidArgumentError):
            await price_service.get_energy_data("electricity", date)

        provider.fetch.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_type(self, price_service):
        """Unknown energy types are rejected."""
        with pytest.raises(InvalidArgumentError):
            await price_service.get_energy_data("water", "2025-06-01")

    @pytest.mark.asyncio
    async def test_corrupt_cache_propagates(self, price_service, provider, cache_service):
        """A corrupt cache file is an error, not a silent refetch."""
        path = cache_service.filename("gas", "2025-06-01")
        path.parent.mkdir(parents=True)
        path.write_text("garbage")

        with pytest.raises(CacheCorruptionError):
            await price_service.get_energy_data("gas", "2025-06-01")

        provider.fetch.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_fetch_error_propagates(self, price_service, provider):
        """Provider failures reach the caller unchanged."""
        provider.fetch.side_effect = FetchError("upstream down")

        with pytest.raises(FetchError, match="upstream down"):
            await price_service.get_energy_data("gas", "2025-06-01")

    @pytest.mark.asyncio
    async def test_store_electricity_data(self, price_service, provider, cache_service, electricity_payload):
        """The electricity job stores today and tomorrow."""
        provider.fetch.return_value = _ok(EnergyType.ELECTRICITY, electricity_payload)

        dates = await price_service.store_electricity_data()

        assert dates == ["2025-06-01", "2025-06-02"]
        assert provider.fetch.await_args_list[0].args == (EnergyType.ELECTRICITY, "2025-06-01")
        assert provider.fetch.await_args_list[1].args == (EnergyType.ELECTRICITY, "2025-06-02")
        for date in dates:
            assert cache_service.filename("electricity", date).exists()

    @pytest.mark.asyncio
    async def test_store_electricity_overwrites_cache(self, price_service, provider, cache_service, entries):
        """The cron job refreshes existing cache files."""
        path = cache_service.filename("electricity", "2025-06-01")
        cache_service.save(price_service.build_cache_entry(EnergyType.ELECTRICITY, entries([9.0], [1])), path)
        provider.fetch.return_value = _ok(EnergyType.ELECTRICITY, {"data": entries([0.1], [1])})

        await price_service.store_electricity_data()

        assert cache_service.check_cache(path).records.price_low.total_price_tax_included == 0.1

    @pytest.mark.asyncio
    async def test_store_electricity_tomorrow_empty(self, price_service, provider, cache_service, electricity_payload):
        """An empty tomorrow fails the job after today has been stored."""
        provider.fetch.side_effect = [
            _ok(EnergyType.ELECTRICITY, electricity_payload),
            _empty(EnergyType.ELECTRICITY),
        ]

        with pytest.raises(EmptyDatasetError, match="2025-06-02"):
            await price_service.store_electricity_data()

        assert cache_service.filename("electricity", "2025-06-01").exists()
        assert not cache_service.filename("electricity", "2025-06-02").exists()

    @pytest.mark.asyncio
    async def test_store_gas_data(self, price_service, provider, cache_service, gas_payload):
        """The gas job fetches the upcoming feed and files it under today."""
        provider.fetch.return_value = _ok(EnergyType.GAS, gas_payload)

        dates = await price_service.store_gas_data()

        assert dates == ["2025-06-01"]
        provider.fetch.assert_awaited_once_with(EnergyType.GAS)
        entry = cache_service.check_cache(cache_service.filename("gas", "2025-06-01"))
        assert entry.records.price_low.total_price_tax_included == 1.19
        assert entry.records.sustainability_high is None

    @pytest.mark.asyncio
    async def test_store_gas_data_empty(self, price_service, provider, cache_service):
        """An empty gas feed stores nothing and is not an error."""
        provider.fetch.return_value = _empty(EnergyType.GAS)

        assert await price_service.store_gas_data() == []
        assert not cache_service.filename("gas", "2025-06-01").exists()
