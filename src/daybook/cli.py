"""daybook CLI - calendar agenda."""

import asyncio
import json
import logging
import sys
from datetime import datetime

import click
import requests

from .adapters.file_notes import FileNoteStore
from .adapters.notes_api import NotesApiAdapter
from .config import Config, load_config
from .controller import AgendaController
from .core.agenda import HourRenderSlot
from .core.items import ScheduledItem
from .core.navigation import Direction, InvalidRangeUnit, as_datetime

logger = logging.getLogger(__name__)

DATE_FORMATS = ["%Y-%m-%d"]
SLOT_FORMATS = ["%Y-%m-%d %H:%M", "%Y-%m-%dT%H:%M"]


def build_controller(config: Config) -> AgendaController:
    """Pick the note store from config and wire the controller."""
    if config.notes_api_url:
        store = NotesApiAdapter(config.notes_api_url)
    else:
        store = FileNoteStore(config.notes_path)
    return AgendaController.from_config(config, store)


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _slot_to_dict(row: HourRenderSlot) -> dict:
    return {
        "hour": row.hour,
        "label": row.label,
        "is_active": row.is_active,
        "is_current": row.is_current,
        "slots": [
            {
                "minute": q.minute_offset,
                "id": q.item.id,
                "body": q.item.body,
                "kind": q.item.kind,
                "start": q.item.start.isoformat() if q.item.start else None,
                "placeholder": q.is_placeholder,
            }
            for q in row.quarter_slots
        ],
    }


def _show_agenda(rows: list[HourRenderSlot], as_json: bool) -> None:
    """Shared agenda display logic."""
    if as_json:
        click.echo(json.dumps([_slot_to_dict(r) for r in rows], indent=2))
        return

    for row in rows:
        # * current hour, > scroll anchor on other days
        marker = "*" if row.is_current else (">" if row.is_active else " ")
        entries = [
            f"[:{q.minute_offset:02d}] {q.item.body}" for q in row.quarter_slots if not q.is_placeholder
        ]
        click.echo(f"{marker} {row.label}  {'  '.join(entries)}".rstrip())


@click.group()
@click.version_option(package_name="daybook")
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr")
@click.pass_context
def main(ctx, verbose: bool):
    """daybook - calendar agenda for your notes."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if verbose else logging.WARNING,
    )
    if ctx.obj is None:
        ctx.obj = load_config()


@main.command()
@click.option("--date", "day", type=click.DateTime(formats=DATE_FORMATS), help="Day to show (default today)")
@click.option("--kind", default=None, help="Only show notes of this kind")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def agenda(config: Config, day: datetime | None, kind: str | None, as_json: bool):
    """Show the hour-by-hour agenda for a day."""
    controller = build_controller(config)
    try:
        rows = controller.agenda(day or controller.today(), kind)
    except (requests.RequestException, ValueError) as e:
        _fail(str(e))
    _show_agenda(rows, as_json)


@main.command()
@click.option("--range", "unit", default=None, help="Day, Week, Fortnight, Month, Quarter or Year")
@click.option("--back", is_flag=True, help="Step backward instead of forward")
@click.option("--date", "day", type=click.DateTime(formats=DATE_FORMATS), help="Starting day (default today)")
@click.pass_obj
def nav(config: Config, unit: str | None, back: bool, day: datetime | None):
    """Print the previous/next date for a range unit."""
    controller = build_controller(config)
    direction = Direction.BACKWARD if back else Direction.FORWARD
    try:
        target = controller.navigate(day or controller.today(), unit or config.default_range, direction)
    except InvalidRangeUnit as e:
        _fail(str(e))
    click.echo(target.to_date_string())


@main.command("range")
@click.option("--range", "unit", default=None, help="Day, Week, Fortnight, Month, Quarter or Year")
@click.option("--date", "day", type=click.DateTime(formats=DATE_FORMATS), help="Day inside the window (default today)")
@click.pass_obj
def show_range(config: Config, unit: str | None, day: datetime | None):
    """Print the visible window of a range unit."""
    controller = build_controller(config)
    try:
        start, end = controller.window(day or controller.today(), unit or config.default_range)
    except InvalidRangeUnit as e:
        _fail(str(e))
    click.echo(f"{start.to_date_string()} .. {end.subtract(days=1).to_date_string()}")


@main.command()
@click.pass_obj
def today(config: Config):
    """Print today's date."""
    click.echo(build_controller(config).today().to_date_string())


@main.command()
@click.argument("body")
@click.option("--at", "at", required=True, type=click.DateTime(formats=SLOT_FORMATS), help="Slot start, e.g. '2024-03-15 09:15'")
@click.option("--kind", default=None, help="Note kind (default from config)")
@click.pass_obj
def add(config: Config, body: str, at: datetime, kind: str | None):
    """Save a note into an agenda slot."""
    controller = build_controller(config)
    note = ScheduledItem(body=body, start=as_datetime(at, config.timezone), kind=kind or config.event_kind)
    try:
        saved = asyncio.run(controller.on_commit(note))
    except (requests.RequestException, ValueError) as e:
        _fail(str(e))
    click.echo(f"Saved {saved.id}")


@main.command()
@click.option("--date", "day", type=click.DateTime(formats=DATE_FORMATS), help="Day to show (default today)")
@click.option("--kind", default=None, help="Only show notes of this kind")
@click.pass_obj
def watch(config: Config, day: datetime | None, kind: str | None):
    """Re-render the agenda periodically to keep the current hour live."""
    from apscheduler.schedulers.blocking import BlockingScheduler
    from apscheduler.triggers.interval import IntervalTrigger

    controller = build_controller(config)

    def refresh() -> None:
        try:
            rows = controller.agenda(day or controller.today(), kind)
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Refresh failed: {e}")
            return
        click.clear()
        _show_agenda(rows, as_json=False)

    refresh()
    scheduler = BlockingScheduler() if config.timezone == "local" else BlockingScheduler(timezone=config.timezone)
    scheduler.add_job(refresh, IntervalTrigger(seconds=config.refresh_seconds), id="agenda_refresh")
    logger.info(f"Refreshing every {config.refresh_seconds}s")
    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        scheduler.shutdown(wait=False)
