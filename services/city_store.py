"""Async HTTP client for the remote city record store."""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Union

import httpx
from pydantic import TypeAdapter, ValidationError

from app.schemas import CityPayload
from models.records import CityRecord

logger = logging.getLogger(__name__)

_CITY_LIST = TypeAdapter(List[CityPayload])


class RecordStoreError(RuntimeError):
    """Base error for failed record store requests."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class FetchError(RecordStoreError):
    """The list query failed or returned an unusable body."""


class CreateError(RecordStoreError):
    """The create command was rejected or never reached the store."""


def format_min_temp(value: float) -> str:
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return str(value)


class CityStoreClient:
    """Thin wrapper over ``httpx.AsyncClient`` for ``/cities``."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "CityStoreClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def list_cities(self, min_temp: float = 0) -> List[CityRecord]:
        params = {"min": format_min_temp(min_temp)}
        try:
            response = await self._client.get("/cities", params=params)
        except httpx.HTTPError as exc:
            raise FetchError(f"Could not reach record store: {exc}") from exc

        if not response.is_success:
            raise FetchError(
                f"Record store returned {response.status_code} for city list.",
                status_code=response.status_code,
            )

        try:
            payload = _CITY_LIST.validate_json(response.content)
        except ValidationError as exc:
            raise FetchError(
                f"Unexpected city list payload: {exc.error_count()} invalid field(s).",
                status_code=response.status_code,
            ) from exc

        records = [item.to_record() for item in payload]
        logger.debug(
            "Fetched city list",
            extra={"min_temp": params["min"], "record_count": len(records)},
        )
        return records

    async def create_city(self, city: str, temp: Union[int, float]) -> None:
        body = {"city": city, "temp": temp}
        try:
            response = await self._client.post("/cities", json=body)
        except httpx.HTTPError as exc:
            raise CreateError(f"Could not reach record store: {exc}") from exc

        if not response.is_success:
            raise CreateError(
                f"Record store rejected {city!r} with status {response.status_code}.",
                status_code=response.status_code,
            )
