"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Literal, Union


class Band(str, Enum):
    """Temperature band a city record falls into."""

    hot = "Hot"
    warm = "Warm"
    cool = "Cool"


BAND_ORDER: tuple[Band, ...] = (Band.hot, Band.warm, Band.cool)

ALL: Literal["All"] = "All"

Selection = Union[Band, Literal["All"]]


@dataclass(frozen=True, slots=True)
class CityRecord:
    """A single city/temperature pair as returned by the record store."""

    city: str
    temp: Union[int, float]


GroupedRecords = Dict[Band, List[CityRecord]]


def parse_selection(value: str) -> Selection:
    """Map user text such as ``"hot"`` or ``"All"`` onto a selection."""
    candidate = value.strip().lower()
    if candidate == ALL.lower():
        return ALL
    for band in BAND_ORDER:
        if band.value.lower() == candidate:
            return band
    raise ValueError(f"Unknown category {value!r}; expected All, Hot, Warm or Cool.")
