"""Pure derivation of the presentation view model from application state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from models.records import BAND_ORDER, Band, GroupedRecords, Selection
from models.state import AppState, SyncStatus
from services.aggregator import average
from services.chart import BAND_COLORS, ChartSeries, build_chart
from services.grouping import filter_view, group

BAND_EMOJI: Dict[Band, str] = {
    Band.hot: "🔥",
    Band.warm: "☀️",
    Band.cool: "❄️",
}

BAND_BACKGROUNDS: Dict[Band, str] = {
    Band.hot: "lightcoral",
    Band.warm: "lemonchiffon",
    Band.cool: "lightblue",
}


@dataclass(frozen=True)
class BandPanel:
    """List-view block for one band."""

    band: Band
    emoji: str
    average: int
    cities: List[str]
    color: str
    background: str


@dataclass(frozen=True)
class ViewModel:
    grouped: GroupedRecords
    filtered: GroupedRecords
    panels: List[BandPanel]
    chart: ChartSeries
    selection: Selection
    status: SyncStatus
    error: Optional[str] = None
    create_error: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self.status is SyncStatus.loading


def build_panels(filtered: GroupedRecords) -> List[BandPanel]:
    panels: List[BandPanel] = []
    for band in BAND_ORDER:
        bucket = filtered.get(band)
        if not bucket:
            continue
        panels.append(
            BandPanel(
                band=band,
                emoji=BAND_EMOJI[band],
                average=average([record.temp for record in bucket]),
                cities=[record.city for record in bucket],
                color=BAND_COLORS[band],
                background=BAND_BACKGROUNDS[band],
            )
        )
    return panels


def derive_view(state: AppState) -> ViewModel:
    """Group, filter and chart ``state`` without touching any I/O."""
    grouped = group(state.records)
    filtered = filter_view(grouped, state.selection)
    return ViewModel(
        grouped=grouped,
        filtered=filtered,
        panels=build_panels(filtered),
        chart=build_chart(filtered, state.selection),
        selection=state.selection,
        status=state.status,
        error=state.error,
        create_error=state.create_error,
    )
