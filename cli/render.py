from __future__ import annotations

from typing import Dict

import typer

from services.chart import CHART_TITLE, CHART_UNIT, ChartSeries
from services.view import BandPanel, ViewModel

_TERMINAL_COLORS: Dict[str, str] = {
    "red": typer.colors.RED,
    "orange": typer.colors.YELLOW,
    "blue": typer.colors.BLUE,
}

_BAR_WIDTH = 40


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def render_panel(panel: BandPanel) -> None:
    fg = _TERMINAL_COLORS.get(panel.color)
    typer.secho(
        f"{panel.emoji} {panel.band.value} (Average Temperature: {panel.average}{CHART_UNIT})",
        fg=fg,
        bold=True,
    )
    for city in panel.cities:
        typer.echo(f"  - {city}")


def render_chart(chart: ChartSeries) -> None:
    echo_heading(CHART_TITLE)
    if not len(chart):
        typer.echo("No data to chart.")
        return
    peak = max(abs(value) for value in chart.values) or 1
    for label, value, color in zip(chart.labels, chart.values, chart.colors):
        bar = "#" * max(1, round(abs(value) / peak * _BAR_WIDTH)) if value else ""
        typer.secho(
            f"{label.value:<5} {bar} {value}{CHART_UNIT}",
            fg=_TERMINAL_COLORS.get(color),
        )


def render_view(view: ViewModel) -> None:
    selection = getattr(view.selection, "value", view.selection)
    echo_heading(f"City Temperature Dashboard [{selection}]")
    if view.error:
        typer.secho(f"Could not refresh cities: {view.error}", fg=typer.colors.RED, err=True)

    typer.echo()
    if view.panels:
        for panel in view.panels:
            render_panel(panel)
    else:
        typer.echo("No cities to show.")

    typer.echo()
    render_chart(view.chart)
