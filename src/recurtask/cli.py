"""recurtask CLI - monthly recurring task generator."""

import logging
import sys

import click

from .config import load_config
from .core.errors import RecurtaskError
from .core.occurrences import MonthRange
from .tsv_format import format_rows
from .workflows import build_schedule, check_templates, holidays_in_month


def _setup_logging(debug: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )


def _parse_month(value: str) -> MonthRange:
    try:
        return MonthRange.parse(value)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(package_name="recurtask")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """recurtask - expand recurring tasks into a month of dated rows."""
    _setup_logging(debug)


@main.command()
@click.argument("year_month")
@click.option("--holidays", "holiday_file", default=None, type=click.Path(dir_okay=False),
              help="Holiday TOML file (overrides config)")
@click.option("--tasks", "task_file", default=None, type=click.Path(dir_okay=False),
              help="Task template TOML file (overrides config)")
@click.option("--output", "-o", type=click.File("w", encoding="utf-8"), default="-",
              help="Write rows to a file instead of stdout")
def generate(year_month: str, holiday_file: str | None, task_file: str | None, output):
    """Generate the tasks for YEAR_MONTH (YYYYMM) as tab-separated rows."""
    month = _parse_month(year_month)
    config = load_config()
    try:
        rows = build_schedule(config, month, holiday_file, task_file)
    except RecurtaskError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    output.write(format_rows(rows))


@main.command()
@click.argument("year_month")
@click.option("--holidays", "holiday_file", default=None, type=click.Path(dir_okay=False),
              help="Holiday TOML file (overrides config)")
def holidays(year_month: str, holiday_file: str | None):
    """List the holidays in YEAR_MONTH (YYYYMM)."""
    month = _parse_month(year_month)
    config = load_config()
    try:
        entries = holidays_in_month(config, month, holiday_file)
    except RecurtaskError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not entries:
        click.echo(f"No holidays in {month.label()}.")
        return

    for h in entries:
        note = f"  ({h.note})" if h.note else ""
        click.echo(f"{h.date.isoformat()} {h.date.strftime('%a')}  {h.name}{note}")


@main.command()
@click.option("--tasks", "task_file", default=None, type=click.Path(dir_okay=False),
              help="Task template TOML file (overrides config)")
def check(task_file: str | None):
    """Validate the repeat setting of every task template."""
    config = load_config()
    try:
        results = check_templates(config, task_file)
    except RecurtaskError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    fatal = False
    for r in results:
        name = r.template.task_name or "(unnamed)"
        if r.ok:
            click.echo(f"  ✓ {name}: {r.rule}")
        elif r.fatal:
            fatal = True
            click.echo(f"  ✗ {name}: {r.error}")
        else:
            click.echo(f"  ! {name}: {r.error} (skipped)")

    click.echo(f"\n{len(results)} task(s) checked")
    if fatal:
        sys.exit(1)


if __name__ == "__main__":
    main()
