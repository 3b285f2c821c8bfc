"""
Zonneplan energy provider.
Validates query parameters, picks the endpoint per energy type and
recognises responses that carry no usable prices.
"""

from typing import Any, Dict, Mapping, Optional, Union

from src.logging_config import get_logger
from src.models.energy import (
    PRICE_KEY,
    EnergyType,
    FetchStatus,
    ProviderResult,
    parse_energy_type,
)
from src.services.http_client import UpstreamClient
from src.utils.time_utils import validate_date


class ZonneplanProvider:
    """Fetches raw electricity and gas prices from the Zonneplan API."""

    def __init__(
        self,
        client: UpstreamClient,
        electricity_endpoint: str = "/energy-prices/electricity/upcoming",
        gas_endpoint: str = "/energy-prices/gas/upcoming",
        logger=None,
    ):
        self.client = client
        self.endpoints = {
            EnergyType.ELECTRICITY: electricity_endpoint,
            EnergyType.GAS: gas_endpoint,
        }
        self.logger = logger or get_logger(__name__)

    async def get_data(self, energy_type: Union[str, EnergyType], date: Optional[str] = None) -> Dict[str, Any]:
        """
        Retrieve the raw upstream response for one energy type.

        Args:
            energy_type: "electricity" or "gas"
            date: Optional YYYY-MM-DD date; omitted means the provider's upcoming window

        Raises:
            InvalidArgumentError: For an unknown type or an invalid date
            FetchError, ConfigurationError: Propagated from the upstream client
        """
        kind = parse_energy_type(energy_type)

        params: Dict[str, Any] = {}
        if date is not None:
            params["date"] = validate_date(date)

        endpoint = self.endpoints[kind]
        self.logger.debug("Retrieving energy data", energy_type=kind.value, date=date, endpoint=endpoint)

        response = await self.client.get(endpoint, params)

        self.logger.info("Fetched energy data", energy_type=kind.value, date=date,
                         data_points=len(response.get("data") or []) if isinstance(response, Mapping) else 0)
        return response

    @staticmethod
    def is_empty(response: Any) -> bool:
        """True when the response has no entries or no entry carries a total price."""
        if not isinstance(response, Mapping):
            return True

        entries = response.get("data")
        if not entries:
            return True

        for entry in entries:
            if isinstance(entry, Mapping) and entry.get(PRICE_KEY) is not None:
                return False

        return True

    async def fetch(self, energy_type: Union[str, EnergyType], date: Optional[str] = None) -> ProviderResult:
        """Fetch and classify the response as OK or EMPTY."""
        kind = parse_energy_type(energy_type)
        response = await self.get_data(kind, date)

        if self.is_empty(response):
            self.logger.warning("No energy data available from API", energy_type=kind.value, date=date)
            return ProviderResult(status=FetchStatus.EMPTY, energy_type=kind, date=date)

        return ProviderResult(
            status=FetchStatus.OK,
            energy_type=kind,
            date=date,
            records=list(response["data"]),
        )
