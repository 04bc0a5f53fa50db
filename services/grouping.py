"""Band grouping and selection filtering for city records."""

from __future__ import annotations

from typing import Iterable

from models.records import ALL, CityRecord, GroupedRecords, Selection
from services.classifier import classify


def group(records: Iterable[CityRecord]) -> GroupedRecords:
    """Partition ``records`` by band, keeping source order inside each bucket."""
    grouped: GroupedRecords = {}
    for record in records:
        grouped.setdefault(classify(record.temp), []).append(record)
    return grouped


def filter_view(grouped: GroupedRecords, selection: Selection) -> GroupedRecords:
    """Restrict ``grouped`` to the selected band.

    ``ALL`` hands back ``grouped`` itself. A band with no records yields an
    empty mapping rather than an empty bucket.
    """
    if selection == ALL:
        return grouped
    bucket = grouped.get(selection)
    if not bucket:
        return {}
    return {selection: bucket}
