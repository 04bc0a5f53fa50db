from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional

import typer

from cli.config import CLIConfig, load_config
from cli.render import render_view
from logging_config import configure_logging
from models.records import ALL, Selection, parse_selection
from models.state import AppState, SyncStatus
from services.city_store import CityStoreClient
from services.sync import CreateOutcome, SyncController, parse_threshold
from services.view import ViewModel


@dataclass
class CLIState:
    config: CLIConfig


app = typer.Typer(
    help="Browse and add city temperatures grouped into Hot, Warm and Cool bands.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1)
    return state


def _parse_category(value: str) -> Selection:
    try:
        return parse_selection(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--category") from exc


def _initial_state(category: str, min_temp: Optional[str]) -> AppState:
    threshold = min_temp or ""
    if parse_threshold(threshold) is None:
        raise typer.BadParameter(
            f"{min_temp!r} is not a non-negative number.", param_hint="--min"
        )
    return AppState(selection=_parse_category(category), threshold=threshold)


def _build_client(config: CLIConfig) -> CityStoreClient:
    return CityStoreClient(config.base_url, timeout=config.timeout)


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Record store base URL (defaults to CITY_STORE_BASE_URL env or http://localhost:8000).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds before a record store request is abandoned.",
    ),
) -> None:
    """Entry point for the CLI."""
    configure_logging()
    ctx.obj = CLIState(config=load_config(base_url=base_url, timeout=timeout))


@app.command("show")
def show_command(
    ctx: typer.Context,
    category: str = typer.Option(ALL, "--category", "-c", help="All, Hot, Warm or Cool."),
    min_temp: Optional[str] = typer.Option(None, "--min", help="Only list cities at or above this °C."),
) -> None:
    """Fetch cities and render the grouped list and chart."""
    state = _get_state(ctx)
    initial = _initial_state(category, min_temp)

    async def run() -> ViewModel:
        async with _build_client(state.config) as store:
            controller = SyncController(store, state=initial)
            await controller.mount()
            return controller.view()

    view = asyncio.run(run())
    render_view(view)
    if view.status is SyncStatus.failed:
        raise typer.Exit(code=1)


@app.command("add")
def add_command(
    ctx: typer.Context,
    city: str = typer.Argument(..., help="City name."),
    temp: str = typer.Argument(..., help="Temperature in °C."),
    category: str = typer.Option(ALL, "--category", "-c", help="All, Hot, Warm or Cool."),
    min_temp: Optional[str] = typer.Option(None, "--min", help="Threshold used for the refreshed list."),
) -> None:
    """Add a city record, then show the refreshed view."""
    state = _get_state(ctx)
    initial = _initial_state(category, min_temp)

    async def run() -> tuple[CreateOutcome, ViewModel]:
        async with _build_client(state.config) as store:
            controller = SyncController(store, state=initial)
            outcome = await controller.submit_new_record(city, temp)
            return outcome, controller.view()

    outcome, view = asyncio.run(run())
    if outcome is CreateOutcome.skipped:
        typer.secho("Nothing submitted: a city name and numeric temperature are required.", err=True)
        raise typer.Exit(code=1)
    if outcome is CreateOutcome.failed:
        typer.secho(f"Could not add {city!r}: {view.create_error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"Added {city.strip()}.", fg=typer.colors.GREEN)
    render_view(view)
    if view.status is SyncStatus.failed:
        raise typer.Exit(code=1)
