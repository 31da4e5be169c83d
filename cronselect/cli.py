"""CLI for the cron field selection core.

Developer CLI to format, parse and list options for a single cron field,
and to replay timestamped click streams through the same disambiguation
and mutation path a UI control uses.
"""

import sys

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from cronselect.config.settings import settings
from cronselect.core.logger import setup_logger
from cronselect.select.clicks import ManualScheduler
from cronselect.select.config import SelectConfig
from cronselect.select.controller import CronSelect
from cronselect.select.formatter import expand, format_selection, is_digits, parse_selection
from cronselect.select.options import build_options
from cronselect.select.types import DiscreteSelection, Selection, UnitDescriptor
from cronselect.select.units import UNITS, get_unit

console = Console()

app = typer.Typer(
    name="cronselect",
    help="cronselect CLI - format, parse and replay cron field selections",
    add_completion=False,
)

UnitOption = typer.Option("minutes", "--unit", "-u", help=f"Unit kind: {', '.join(UNITS)}")
HumanizeOption = typer.Option(False, "--humanize", help="Humanize week days, months and 12-hour clock")
ClockOption = typer.Option("24", "--clock", help="Clock format: 12 or 24")
LeadingZeroOption = typer.Option(False, "--leading-zero", help="Pad values below 10 with a zero")


def _fail(message: str) -> None:
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(code=1)


def _resolve_unit(kind: str) -> UnitDescriptor:
    try:
        return get_unit(kind)
    except ValueError as e:
        _fail(str(e))
        raise


def _build_config(humanize: bool, clock: str, leading_zero: bool, **overrides: object) -> SelectConfig:
    if clock not in ("12", "24"):
        _fail(f"Invalid clock format: {clock}. Use 12 or 24.")
    return SelectConfig.from_settings(
        settings,
        humanize_labels=humanize or settings.humanize_labels,
        clock_format=clock,
        leading_zero=leading_zero or settings.leading_zero,
        **overrides,
    )


def _parse_values(raw: str) -> DiscreteSelection:
    values: list[int] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        if not is_digits(part):
            _fail(f"Invalid value: {part!r}")
        values.append(int(part))
    return DiscreteSelection(values=values)


@app.callback()
def main(debug: bool = typer.Option(False, "--debug", help="Enable debug logging")) -> None:
    setup_logger(level="DEBUG" if debug else None)


@app.command("format")
def format_command(
    values: str = typer.Argument("", help="Comma-separated values, e.g. 1,2,3,7"),
    unit: str = UnitOption,
    humanize: bool = HumanizeOption,
    clock: str = ClockOption,
    leading_zero: bool = LeadingZeroOption,
) -> None:
    """Format a set of values as display text."""
    descriptor = _resolve_unit(unit)
    config = _build_config(humanize, clock, leading_zero)
    console.print(format_selection(_parse_values(values), descriptor, config), highlight=False)


@app.command("parse")
def parse_command(
    text: str = typer.Argument(..., help="Display text or cron field, e.g. '1-31/5' or 'MON-FRI'"),
    unit: str = UnitOption,
    humanize: bool = HumanizeOption,
    clock: str = ClockOption,
    leading_zero: bool = LeadingZeroOption,
) -> None:
    """Parse display text and print the values it stands for."""
    descriptor = _resolve_unit(unit)
    config = _build_config(humanize, clock, leading_zero)
    selection = parse_selection(text, descriptor, config)
    if selection is None:
        _fail(f"Cannot parse {text!r} for unit {unit}")
        return
    values = expand(selection, descriptor)
    console.print(",".join(str(v) for v in values) if values else "*", highlight=False)


@app.command("options")
def options_command(
    unit: str = UnitOption,
    humanize: bool = HumanizeOption,
    clock: str = ClockOption,
    leading_zero: bool = LeadingZeroOption,
    periodic: bool = typer.Option(True, "--periodic/--no-periodic", help="Include 'every N' options"),
) -> None:
    """List the option catalog for a unit."""
    descriptor = _resolve_unit(unit)
    config = _build_config(
        humanize,
        clock,
        leading_zero,
        filter_option=None if periodic else (lambda option: not option.is_periodic),
    )

    table = Table(title=f"Options: {descriptor.kind}")
    table.add_column("Token", style="cyan")
    table.add_column("Label")
    table.add_column("Periodic")
    for option in build_options(descriptor, config):
        table.add_row(option.token, option.label, "yes" if option.is_periodic else "")
    console.print(table)


@app.command("replay")
def replay_command(
    clicks: list[str] = typer.Argument(..., help="Clicks as token@ms, e.g. 5@0 5@100 7@600"),
    unit: str = UnitOption,
    value: str = typer.Option("", "--value", help="Initial comma-separated values"),
    mode: str = typer.Option("multiple", "--mode", help="single or multiple"),
    double_click: bool = typer.Option(False, "--double-click", help="Enable periodicity on double click"),
    humanize: bool = HumanizeOption,
    clock: str = ClockOption,
    leading_zero: bool = LeadingZeroOption,
) -> None:
    """Replay timestamped clicks and print every committed selection."""
    descriptor = _resolve_unit(unit)
    if mode not in ("single", "multiple"):
        _fail(f"Invalid mode: {mode}. Use single or multiple.")
    config = _build_config(
        humanize,
        clock,
        leading_zero,
        mode=mode,
        periodicity_on_double_click=double_click or settings.periodicity_on_double_click,
    )

    events: list[tuple[str, int]] = []
    for raw in clicks:
        token, sep, stamp = raw.rpartition("@")
        if not sep or not token or not is_digits(stamp):
            _fail(f"Invalid click: {raw!r}. Expected token@ms")
        events.append((token, int(stamp)))
    events.sort(key=lambda event: event[1])

    scheduler = ManualScheduler(start_ms=events[0][1] if events else 0)
    commits: list[Selection] = []
    select = CronSelect(descriptor, commits.append, value=_parse_values(value), config=config, scheduler=scheduler)

    for token, stamp in events:
        scheduler.advance_to(stamp)
        select.click(token, now_ms=stamp)
    scheduler.advance(config.click_window_ms)

    logger.debug(f"Replayed {len(events)} click(s), {len(commits)} commit(s)")
    for index, selection in enumerate(commits, start=1):
        values = ",".join(str(v) for v in expand(selection, descriptor)) or "*"
        console.print(f"{index}. {values}  ->  {format_selection(selection, descriptor, config)}", highlight=False)


if __name__ == "__main__":
    sys.exit(app())
