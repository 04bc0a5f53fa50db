"""HTTP route definitions for the reference record store."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, status

from app.schemas import CityPayload
from datastore.city_table import CityTable, build_default_table

logger = logging.getLogger(__name__)

router = APIRouter()


def get_table() -> CityTable:
    return build_default_table()


@router.get(
    "/cities",
    response_model=list[CityPayload],
    summary="List cities at or above a minimum temperature.",
)
async def list_cities(
    min_temp: float = Query(0, alias="min", ge=0, description="Minimum temperature in °C."),
    table: CityTable = Depends(get_table),
) -> list[CityPayload]:
    items = table.scan(min_temp)
    logger.debug("Listed cities", extra={"min_temp": min_temp, "record_count": len(items)})
    return items


@router.post(
    "/cities",
    status_code=status.HTTP_201_CREATED,
    response_model=CityPayload,
    summary="Add a city temperature record.",
)
async def create_city(
    payload: CityPayload,
    table: CityTable = Depends(get_table),
) -> CityPayload:
    table.put_item(payload)
    logger.info("Stored city", extra={"city": payload.city, "temp": payload.temp})
    return payload


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /health for service status."}
