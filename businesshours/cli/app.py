"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, List, NoReturn, Optional

import pendulum
import typer
from pendulum import DateTime
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from ..config import AppConfig, get_default_config_path
from ..domain.exceptions import BusinessHoursError
from ..domain.models import BusinessHoursOptions
from ..domain.normalizer import normalize_options
from ..services.business_hours import (
    add_business_hours,
    business_hours_in_interval,
    is_within_business_hours,
)

app = typer.Typer(
    name="businesshours",
    help="Business hours arithmetic against a configurable working calendar",
    add_completion=False
)

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

ConfigOption = Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./businesshours.yaml")]
StartOfDayOption = Annotated[Optional[str], typer.Option("--start-of-day", help="Start of the working day (HH:MM)")]
EndOfDayOption = Annotated[Optional[str], typer.Option("--end-of-day", help="End of the working day (HH:MM)")]
WorkingDayOption = Annotated[Optional[List[int]], typer.Option("--working-day", help="Working weekday, 0=Monday ... 6=Sunday. Repeatable.")]
HolidayOption = Annotated[Optional[List[str]], typer.Option("--holiday", help="Holiday date (YYYY-MM-DD). Repeatable.")]
TimezoneOption = Annotated[Optional[str], typer.Option("--timezone", "--tz", help="Timezone to evaluate the calendar in")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")]


def _configure_logging(level: str) -> None:
    """Route library log records through Rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _load_config(config_file: Optional[Path]) -> AppConfig:
    """
    Load the config file.

    An explicitly passed file must exist; the default location is optional
    and falls back to built-in defaults.
    """
    if config_file is not None:
        return AppConfig.load_from_yaml(config_file)

    default_path = get_default_config_path()
    if default_path.exists():
        return AppConfig.load_from_yaml(default_path)

    return AppConfig()


def _build_options(
    *,
    config_file: Optional[Path],
    start_of_day: Optional[str],
    end_of_day: Optional[str],
    working_days: Optional[List[int]],
    holidays: Optional[List[str]],
    timezone: Optional[str],
    verbose: bool,
) -> tuple[BusinessHoursOptions, Optional[str]]:
    """
    Merge the config file with explicit command line options.
    Returns (options, timezone).
    """
    config = _load_config(config_file)

    if timezone is not None:
        config = AppConfig.model_validate({**config.model_dump(), "timezone": timezone})

    _configure_logging("DEBUG" if verbose else config.log_level)

    options = config.build_options()
    overrides = {
        "start_of_day": start_of_day,
        "end_of_day": end_of_day,
        "working_days": tuple(working_days) if working_days else None,
        "holidays": tuple(holidays) if holidays else None,
    }
    options = BusinessHoursOptions(
        **{
            name: value if value is not None else getattr(options, name)
            for name, value in overrides.items()
        },
        context=options.context,
    )

    # Fail early with a readable message before any parsing of instants
    calendar = normalize_options(options)
    logger.debug("Using calendar %s", calendar)

    return options, config.timezone


def _parse_instant(value: str, tz: Optional[str]) -> DateTime:
    """Parse a command line instant as wall-clock time in ``tz``."""
    try:
        parsed = pendulum.parse(value, tz=tz or "UTC")
    except ValueError as exc:
        raise typer.BadParameter(f"Cannot parse date/time '{value}': {exc}") from exc

    if not isinstance(parsed, DateTime):
        raise typer.BadParameter(f"'{value}' is not a date/time")

    return parsed


def _fail(exc: Exception) -> NoReturn:
    err_console.print(f"[bold red]Error:[/bold red] {exc}")
    raise typer.Exit(1)


@app.command()
def check(
    instant: Annotated[str, typer.Argument(help="Date/time to check, e.g. '2024-11-25 10:00'")],
    config_file: ConfigOption = None,
    start_of_day: StartOfDayOption = None,
    end_of_day: EndOfDayOption = None,
    working_day: WorkingDayOption = None,
    holiday: HolidayOption = None,
    timezone: TimezoneOption = None,
    verbose: VerboseOption = False,
):
    """
    Check whether a date/time falls inside business hours.

    Examples:

        businesshours check "2024-11-25 10:00"
        businesshours check "2024-11-25 10:00" --holiday 2024-11-25
    """
    try:
        options, tz = _build_options(
            config_file=config_file,
            start_of_day=start_of_day,
            end_of_day=end_of_day,
            working_days=working_day,
            holidays=holiday,
            timezone=timezone,
            verbose=verbose,
        )
        moment = _parse_instant(instant, tz)
        inside = is_within_business_hours(moment, options)
    except (FileNotFoundError, ValueError, BusinessHoursError) as e:
        _fail(e)

    when = moment.format("dddd, YYYY-MM-DD HH:mm")
    if inside:
        console.print(f"[green]✓ {when} is within business hours[/green]")
    else:
        console.print(f"[yellow]✗ {when} is outside business hours[/yellow]")


@app.command()
def interval(
    start: Annotated[str, typer.Argument(help="Start of the interval")],
    end: Annotated[str, typer.Argument(help="End of the interval")],
    config_file: ConfigOption = None,
    start_of_day: StartOfDayOption = None,
    end_of_day: EndOfDayOption = None,
    working_day: WorkingDayOption = None,
    holiday: HolidayOption = None,
    timezone: TimezoneOption = None,
    verbose: VerboseOption = False,
):
    """
    Count the business hours between two date/times.

    Examples:

        businesshours interval "2024-11-25 09:00" "2024-11-27 17:00"
    """
    try:
        options, tz = _build_options(
            config_file=config_file,
            start_of_day=start_of_day,
            end_of_day=end_of_day,
            working_days=working_day,
            holidays=holiday,
            timezone=timezone,
            verbose=verbose,
        )
        interval_start = _parse_instant(start, tz)
        interval_end = _parse_instant(end, tz)
        hours = business_hours_in_interval((interval_start, interval_end), options)
    except (FileNotFoundError, ValueError, BusinessHoursError) as e:
        _fail(e)

    console.print(Panel.fit(
        f"[bold]From:[/bold] {interval_start.format('dddd, YYYY-MM-DD HH:mm')}\n"
        f"[bold]To:[/bold]   {interval_end.format('dddd, YYYY-MM-DD HH:mm')}\n\n"
        f"[bold green]{hours:g} business hours[/bold green]",
        title="Business hours"
    ))


@app.command()
def add(
    instant: Annotated[str, typer.Argument(help="Starting date/time")],
    hours: Annotated[float, typer.Argument(help="Business hours to add; negative values subtract")],
    config_file: ConfigOption = None,
    start_of_day: StartOfDayOption = None,
    end_of_day: EndOfDayOption = None,
    working_day: WorkingDayOption = None,
    holiday: HolidayOption = None,
    timezone: TimezoneOption = None,
    verbose: VerboseOption = False,
):
    """
    Offset a date/time by a number of business hours.

    Examples:

        businesshours add "2024-11-22 15:00" 4
        businesshours add "2024-11-25 09:00" -- -5
    """
    try:
        options, tz = _build_options(
            config_file=config_file,
            start_of_day=start_of_day,
            end_of_day=end_of_day,
            working_days=working_day,
            holidays=holiday,
            timezone=timezone,
            verbose=verbose,
        )
        moment = _parse_instant(instant, tz)
        result = add_business_hours(moment, hours, options)
    except (FileNotFoundError, ValueError, BusinessHoursError) as e:
        _fail(e)

    if result is None:
        _fail(ValueError(f"Cannot add {hours} business hours to {instant}"))

    console.print(pendulum.instance(result).format("dddd, YYYY-MM-DD HH:mm"))


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]businesshours[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
