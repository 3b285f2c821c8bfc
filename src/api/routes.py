"""
FastAPI route handlers for the energy price endpoints.
Two cron-triggered ingestion endpoints and two cache-or-fetch read endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from src.api.dependencies import get_price_service
from src.exceptions import EmptyDatasetError, InvalidArgumentError, PriceAPIException
from src.logging_config import get_logger
from src.models.energy import EnergyType
from src.services.price_service import PriceService

logger = get_logger(__name__)

router = APIRouter()

STORED_MESSAGE = "Json object stored successfully"


@router.get("/execute_cronjob_electricity")
async def execute_cronjob_electricity(service: PriceService = Depends(get_price_service)):
    """
    Fetch, rank and cache electricity prices for today and tomorrow.

    Meant to be triggered by an external scheduler.

    Raises:
        HTTPException: 404 if either date has no data, 500 for any other failure.
    """
    try:
        dates = await service.store_electricity_data()
        return {"data": {"result": STORED_MESSAGE, "dates": dates}}

    except EmptyDatasetError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PriceAPIException as e:
        logger.error("Electricity cronjob failed", error=str(e))
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.error("Unexpected error", error=str(e), job="electricity")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/execute_cronjob_gas")
async def execute_cronjob_gas(service: PriceService = Depends(get_price_service)):
    """
    Fetch, rank and cache today's gas prices.

    An empty upstream feed is not an error; nothing is stored in that case.
    """
    try:
        dates = await service.store_gas_data()
        return {"data": {"result": STORED_MESSAGE, "dates": dates}}

    except PriceAPIException as e:
        logger.error("Gas cronjob failed", error=str(e))
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.error("Unexpected error", error=str(e), job="gas")
        raise HTTPException(status_code=500, detail=str(e))


async def _read_energy_data(service: PriceService, energy_type: EnergyType, date: Optional[str]):
    try:
        entry = await service.get_energy_data(energy_type, date)
        return {"data": entry.to_dict()}

    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except EmptyDatasetError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PriceAPIException as e:
        logger.error("Price API error", error=str(e), energy_type=energy_type.value, date=date)
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.error("Unexpected error", error=str(e), energy_type=energy_type.value, date=date)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/get_electricity_data")
async def get_electricity_data(
    date: Optional[str] = Query(
        default=None,
        description="Date in YYYY-MM-DD format. Defaults to today."
    ),
    service: PriceService = Depends(get_price_service),
):
    """
    Return ranked electricity prices and the low/high/sustainability summary for a date.

    Served from the cache when present, otherwise fetched and cached.

    Raises:
        HTTPException: 400 for an invalid date, 404 if no data exists, 500 for server errors.
    """
    return await _read_energy_data(service, EnergyType.ELECTRICITY, date)


@router.get("/get_gas_data")
async def get_gas_data(
    date: Optional[str] = Query(
        default=None,
        description="Date in YYYY-MM-DD format. Defaults to today."
    ),
    service: PriceService = Depends(get_price_service),
):
    """Return ranked gas prices and the low/high summary for a date."""
    return await _read_energy_data(service, EnergyType.GAS, date)
