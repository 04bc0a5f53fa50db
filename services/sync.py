"""Synchronization of the local city collection with the remote record store."""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from enum import Enum
from typing import List, Optional, Protocol, Union

from models.records import CityRecord, Selection
from models.state import AppState, SyncStatus
from services.city_store import CreateError, FetchError
from services.view import ViewModel, derive_view

logger = logging.getLogger(__name__)

Number = Union[int, float]


class CityStore(Protocol):
    async def list_cities(self, min_temp: float = 0) -> List[CityRecord]: ...

    async def create_city(self, city: str, temp: Number) -> None: ...


class CreateOutcome(str, Enum):
    """Result of a record submission."""

    skipped = "skipped"
    created = "created"
    failed = "failed"


def parse_threshold(value: Optional[str]) -> Optional[float]:
    """Blank means 0; otherwise a finite, non-negative number or ``None``."""
    candidate = (value or "").strip()
    if not candidate:
        return 0.0
    try:
        parsed = float(candidate)
    except ValueError:
        return None
    if not math.isfinite(parsed) or parsed < 0:
        return None
    return parsed


def parse_temperature(value: Union[str, Number, None]) -> Optional[Number]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else None
    candidate = value.strip()
    if not candidate:
        return None
    try:
        return int(candidate)
    except ValueError:
        pass
    try:
        parsed = float(candidate)
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None


class SyncController:
    """Owns :class:`AppState` and applies only the latest list response.

    Every list query takes a new generation number. When a response comes
    back, success or failure, it is applied only if no newer query has been
    issued in the meantime, so out-of-order arrivals are discarded.
    """

    def __init__(self, store: CityStore, state: Optional[AppState] = None) -> None:
        self._store = store
        self._state = state or AppState()
        self._generation = 0

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    def view(self) -> ViewModel:
        return derive_view(self._state)

    def set_selection(self, selection: Selection) -> None:
        self._state = replace(self._state, selection=selection)

    async def mount(self) -> None:
        await self.refresh()

    async def set_threshold(self, value: str) -> None:
        if parse_threshold(value) is None:
            logger.info(
                "Ignoring invalid threshold",
                extra={"reason": "not a non-negative number", "min_temp": value},
            )
            return
        self._state = replace(self._state, threshold=value)
        await self.refresh()

    async def refresh(self) -> None:
        min_temp = parse_threshold(self._state.threshold) or 0.0
        self._generation += 1
        generation = self._generation
        self._state = replace(self._state, status=SyncStatus.loading)

        try:
            records = await self._store.list_cities(min_temp)
        except FetchError as exc:
            if self._is_stale(generation):
                return
            logger.warning(
                "City list query failed",
                extra={
                    "generation": generation,
                    "min_temp": min_temp,
                    "status_code": exc.status_code,
                    "reason": str(exc),
                },
            )
            self._state = replace(self._state, status=SyncStatus.failed, error=str(exc))
            return

        if self._is_stale(generation):
            return
        self._state = replace(
            self._state,
            records=tuple(records),
            status=SyncStatus.ready,
            error=None,
        )
        logger.info(
            "City list refreshed",
            extra={"generation": generation, "min_temp": min_temp, "record_count": len(records)},
        )

    async def submit_new_record(
        self, city: Optional[str], temp: Union[str, Number, None]
    ) -> CreateOutcome:
        name = (city or "").strip()
        parsed_temp = parse_temperature(temp)
        if not name or parsed_temp is None:
            return CreateOutcome.skipped

        try:
            await self._store.create_city(name, parsed_temp)
        except CreateError as exc:
            logger.warning(
                "City create failed",
                extra={
                    "city": name,
                    "temp": parsed_temp,
                    "status_code": exc.status_code,
                    "reason": str(exc),
                },
            )
            self._state = replace(self._state, create_error=str(exc))
            return CreateOutcome.failed

        logger.info("City created", extra={"city": name, "temp": parsed_temp})
        self._state = replace(self._state, create_error=None)
        await self.refresh()
        return CreateOutcome.created

    def _is_stale(self, generation: int) -> bool:
        if generation == self._generation:
            return False
        logger.debug(
            "Discarding stale city list response",
            extra={"generation": generation, "reason": f"superseded by {self._generation}"},
        )
        return True
