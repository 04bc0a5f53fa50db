from __future__ import annotations

import pytest

from models.records import ALL, Band, CityRecord
from services.chart import BAND_COLORS, build_chart
from services.grouping import filter_view, group


def _scenario_records() -> list[CityRecord]:
    return [
        CityRecord(city="Austin", temp=35),
        CityRecord(city="Boston", temp=18),
        CityRecord(city="Denver", temp=22),
    ]


def test_chart_for_all_bands_follows_display_order() -> None:
    grouped = group(_scenario_records())

    chart = build_chart(filter_view(grouped, ALL), ALL)

    assert chart.labels == [Band.hot, Band.warm, Band.cool]
    assert chart.values == [35, 22, 18]
    assert chart.colors == ["red", "orange", "blue"]


def test_chart_for_single_band_uses_that_band_color() -> None:
    grouped = group(_scenario_records() + [CityRecord(city="Lima", temp=24)])

    chart = build_chart(filter_view(grouped, Band.warm), Band.warm)

    assert chart.labels == [Band.warm]
    assert chart.values == [23]
    assert chart.colors == [BAND_COLORS[Band.warm]]


def test_chart_skips_absent_bands_and_keeps_colors_per_band() -> None:
    grouped = group([CityRecord(city="Austin", temp=35), CityRecord(city="Boston", temp=18)])

    chart = build_chart(filter_view(grouped, ALL), ALL)

    assert chart.labels == [Band.hot, Band.cool]
    assert chart.colors == ["red", "blue"]


def test_chart_for_empty_selection_is_empty() -> None:
    grouped = group([CityRecord(city="Austin", temp=35)])

    chart = build_chart(filter_view(grouped, Band.cool), Band.cool)

    assert chart.labels == []
    assert chart.values == []
    assert chart.colors == []
    assert len(chart) == 0


@pytest.mark.parametrize("selection", [ALL, Band.hot, Band.warm, Band.cool])
@pytest.mark.parametrize(
    "records",
    [
        [],
        [CityRecord(city="Austin", temp=35)],
        [CityRecord(city="Boston", temp=18), CityRecord(city="Denver", temp=22)],
    ],
)
def test_chart_series_stay_index_aligned(records: list[CityRecord], selection: object) -> None:
    chart = build_chart(filter_view(group(records), selection), selection)

    assert len(chart.labels) == len(chart.values) == len(chart.colors)
    assert chart.colors == [BAND_COLORS[label] for label in chart.labels]
