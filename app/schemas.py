"""Pydantic schemas for the record store HTTP contract."""

from __future__ import annotations

from typing import Annotated, Union

from pydantic import AllowInfNan, BaseModel, ConfigDict, Field, Strict, StrictInt

from models.records import CityRecord

StrictFiniteFloat = Annotated[float, Strict(), AllowInfNan(False)]


class CityPayload(BaseModel):
    """A city/temperature pair as exchanged with the record store."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    city: str = Field(..., min_length=1, description="City name.")
    temp: Union[StrictInt, StrictFiniteFloat] = Field(..., description="Temperature in °C.")

    @classmethod
    def from_record(cls, record: CityRecord) -> "CityPayload":
        return cls(city=record.city, temp=record.temp)

    def to_record(self) -> CityRecord:
        return CityRecord(city=self.city, temp=self.temp)
