"""CLI entry point for dottime."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from dottime.config.defaults import DEFAULT_PREFS_PATH, MIN_BIRTH_YEAR
from dottime.config.schema import Preferences
from dottime.core.clock import parse_date, today
from dottime.core.grid import chunk_rows, grid_layout
from dottime.core.timecalc import (
    VIEW_MODES,
    DotCell,
    TimeData,
    compute_time_data,
    generate_dot_cells,
)
from dottime.io.serialize import dump_dot_cells_csv, dump_preferences, dump_time_data
from dottime.notify.reminders import build_daily_reminder, make_rng, random_quote
from dottime.storage.store import JsonFilePreferenceStore, load_preferences, save_preferences
from dottime.utils.exceptions import DottimeError

logger = logging.getLogger(__name__)

PASSED_GLYPH = "●"
TODAY_GLYPH = "◉"
FUTURE_GLYPH = "○"


@dataclass(frozen=True)
class _Query:
    view_mode: str
    birth_year: int
    now: date
    time_data: TimeData
    prefs: Preferences


def _prefs_option(f: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--prefs",
        "prefs_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=DEFAULT_PREFS_PATH,
        show_default=True,
        help="Path to the preferences JSON file.",
    )(f)


def _query_options(f: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by every command that computes a period."""

    @click.option(
        "--view",
        "view_mode",
        type=click.Choice(VIEW_MODES),
        default=None,
        help="View mode. Defaults to the stored preference.",
    )
    @click.option(
        "--birth-year",
        type=click.IntRange(MIN_BIRTH_YEAR, date.today().year),
        default=None,
        help="Birth year for the life view.",
    )
    @click.option("--date", "date_str", default=None, help="Reference date (YYYY-MM-DD).")
    @click.option("--tz", default=None, help="IANA timezone for today's date.")
    @_prefs_option
    @functools.wraps(f)
    def wrapper(
        view_mode: str | None,
        birth_year: int | None,
        date_str: str | None,
        tz: str | None,
        prefs_path: Path,
        **kwargs: Any,
    ) -> Any:
        try:
            stored = load_preferences(JsonFilePreferenceStore(prefs_path))
            now = parse_date(date_str) if date_str is not None else today(tz)
        except DottimeError as exc:
            raise click.ClickException(str(exc)) from exc
        view = view_mode or stored.view_mode
        year = birth_year if birth_year is not None else stored.effective_birth_year
        if view == "life" and year > now.year:
            raise click.BadParameter(
                f"birth year {year} is after {now.isoformat()}", param_hint="--birth-year"
            )
        logger.debug("Computing %s view for %s (birth year %d)", view, now, year)
        query = _Query(
            view_mode=view,
            birth_year=year,
            now=now,
            time_data=compute_time_data(view, year, now),
            prefs=stored,
        )
        return f(query, **kwargs)

    return wrapper


def render_grid_text(cells: list[DotCell], columns: int) -> str:
    """Render cells as rows of glyphs."""
    lines = []
    for row in chunk_rows(cells, columns):
        glyphs = [
            TODAY_GLYPH if c.is_today else PASSED_GLYPH if c.is_passed else FUTURE_GLYPH
            for c in row
        ]
        lines.append(" ".join(glyphs))
    return "\n".join(lines)


@click.group()
@click.version_option(package_name="dottime")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """dottime — see the days and years you have left as dots."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


@cli.command()
@_query_options
def show(query: _Query) -> None:
    """Print the remaining units and progress."""
    td = query.time_data
    click.echo(f"{td.remaining_units} {td.label}")
    click.echo(f"{td.passed_units}/{td.total_units} passed ({td.progress:.1%})")


@cli.command()
@_query_options
@click.option("--width", default=390.0, type=float, help="Screen width used for the layout.")
def grid(query: _Query, width: float) -> None:
    """Print the dot grid."""
    td = query.time_data
    layout = grid_layout(query.view_mode, width)
    cells = generate_dot_cells(td, query.view_mode, query.now)
    click.echo(f"{td.remaining_units} {td.label}\n")
    click.echo(render_grid_text(cells, layout.columns))


@cli.command()
@_query_options
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "csv"]),
    default="json",
    show_default=True,
    help="json writes the summary, csv writes one row per dot.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="File to write. Prints to stdout if not provided.",
)
def export(query: _Query, fmt: str, output_path: Path | None) -> None:
    """Export the summary or the dot cells."""
    if fmt == "json":
        text = dump_time_data(query.view_mode, query.now, query.time_data)
    else:
        text = dump_dot_cells_csv(generate_dot_cells(query.time_data, query.view_mode, query.now))

    if output_path is None:
        click.echo(text, nl=False)
        return
    output_path.write_text(text)
    click.echo(f"Written to {output_path}")


@cli.command()
@_query_options
@click.option("--seed", default=None, type=int, help="Random seed for the quote.")
def remind(query: _Query, seed: int | None) -> None:
    """Print the daily reminder."""
    reminder = build_daily_reminder(
        query.time_data, query.prefs.notifications, random_quote(make_rng(seed))
    )
    click.echo(reminder.title)
    click.echo(reminder.body)


@cli.group()
def prefs() -> None:
    """Show or change stored preferences."""


@prefs.command("show")
@_prefs_option
def prefs_show(prefs_path: Path) -> None:
    """Print the stored preferences as JSON."""
    click.echo(dump_preferences(load_preferences(JsonFilePreferenceStore(prefs_path))))


@prefs.command("set")
@_prefs_option
@click.option("--view", "view_mode", type=click.Choice(VIEW_MODES), default=None)
@click.option("--birth-year", type=int, default=None)
@click.option("--dot-color", default=None, help="Dot colour preset.")
@click.option("--background", default=None, help="Background preset.")
@click.option("--font", default=None, help="Font preset.")
@click.option("--reminder/--no-reminder", "reminder_enabled", default=None)
@click.option("--reminder-time", default=None, help="Reminder time as HH:MM.")
def prefs_set(
    prefs_path: Path,
    view_mode: str | None,
    birth_year: int | None,
    dot_color: str | None,
    background: str | None,
    font: str | None,
    reminder_enabled: bool | None,
    reminder_time: str | None,
) -> None:
    """Update stored preferences."""
    store = JsonFilePreferenceStore(prefs_path)
    current = load_preferences(store)

    updates: dict[str, Any] = {
        k: v
        for k, v in {
            "view_mode": view_mode,
            "birth_year": birth_year,
            "dot_color": dot_color,
            "background": background,
            "font": font,
        }.items()
        if v is not None
    }
    notifications = current.notifications.model_dump()
    if reminder_enabled is not None:
        notifications["enabled"] = reminder_enabled
    if reminder_time is not None:
        hour, _, minute = reminder_time.partition(":")
        if not (hour.isdigit() and minute.isdigit()):
            raise click.BadParameter("expected HH:MM", param_hint="--reminder-time")
        notifications.update(hour=int(hour), minute=int(minute))
    updates["notifications"] = notifications

    try:
        updated = Preferences.model_validate({**current.model_dump(), **updates})
    except ValidationError as exc:
        raise click.ClickException(str(exc)) from exc

    if not save_preferences(store, updated):
        raise click.ClickException(f"Could not save preferences to {prefs_path}")
    click.echo(dump_preferences(updated))


if __name__ == "__main__":
    cli()
