"""Chart series derived from grouped city records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from models.records import ALL, BAND_ORDER, Band, GroupedRecords, Selection
from services.aggregator import average

BAND_COLORS: Dict[Band, str] = {
    Band.hot: "red",
    Band.warm: "orange",
    Band.cool: "blue",
}

CHART_TITLE = "Average Temperature by Category"
CHART_UNIT = "°C"


@dataclass(frozen=True)
class ChartSeries:
    """Index-aligned labels, rounded averages and colors for a bar chart."""

    labels: List[Band] = field(default_factory=list)
    values: List[int] = field(default_factory=list)
    colors: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.labels)


def build_chart(filtered: GroupedRecords, selection: Selection) -> ChartSeries:
    labels: List[Band] = []
    values: List[int] = []
    colors: List[str] = []

    for band in BAND_ORDER:
        bucket = filtered.get(band)
        if not bucket:
            continue
        if selection != ALL and band != selection:
            continue
        labels.append(band)
        values.append(average([record.temp for record in bucket]))
        colors.append(BAND_COLORS[band])

    return ChartSeries(labels=labels, values=values, colors=colors)
