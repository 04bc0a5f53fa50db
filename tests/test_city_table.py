"""Unit tests for the in-memory city table."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from app.schemas import CityPayload
from datastore.city_table import CityTable


def test_put_and_scan_keeps_insertion_order() -> None:
    table = CityTable()
    table.put_item(CityPayload(city="Oslo", temp=4))
    table.put_item(CityPayload(city="Cairo", temp=33))
    table.put_item(CityPayload(city="Lima", temp=24))

    assert [item.city for item in table.scan()] == ["Oslo", "Cairo", "Lima"]
    assert len(table) == 3


def test_scan_applies_inclusive_minimum() -> None:
    table = CityTable()
    table.put_item(CityPayload(city="Lima", temp=24))
    table.put_item(CityPayload(city="Rome", temp=25))

    assert [item.city for item in table.scan(25)] == ["Rome"]
    assert table.scan(40) == []


def test_seed_file_is_loaded(tmp_path) -> None:
    path = tmp_path / "cities.json"
    path.write_text(json.dumps([{"city": "Austin", "temp": 35}, {"city": "Boston", "temp": 18.5}]))

    table = CityTable(seed_path=path)

    assert table.scan() == [CityPayload(city="Austin", temp=35), CityPayload(city="Boston", temp=18.5)]


def test_empty_seed_file_yields_empty_table(tmp_path) -> None:
    path = tmp_path / "cities.json"
    path.write_text("")

    assert len(CityTable(seed_path=path)) == 0


def test_missing_seed_file_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        CityTable(seed_path=tmp_path / "missing.json")


def test_malformed_seed_file_raises(tmp_path) -> None:
    path = tmp_path / "cities.json"
    path.write_text(json.dumps([{"city": "", "temp": 3}]))

    with pytest.raises(ValidationError):
        CityTable(seed_path=path)


def test_payload_round_trips_to_domain_record() -> None:
    payload = CityPayload(city="  Austin ", temp=35)

    record = payload.to_record()

    assert record.city == "Austin"
    assert CityPayload.from_record(record) == payload


@pytest.mark.parametrize("temp", ["30", True, float("inf")])
def test_payload_rejects_non_numeric_or_non_finite_temps(temp) -> None:
    with pytest.raises(ValidationError):
        CityPayload(city="Oslo", temp=temp)


def test_payload_keeps_int_and_float_temps() -> None:
    assert type(CityPayload.model_validate_json('{"city": "Oslo", "temp": 4}').temp) is int
    assert CityPayload.model_validate_json('{"city": "Lima", "temp": 24.5}').temp == 24.5


def test_table_without_seed_starts_empty() -> None:
    table = CityTable()

    table._load_seed()  # type: ignore[attr-defined]

    assert table.seed_path is None
    assert len(table) == 0
