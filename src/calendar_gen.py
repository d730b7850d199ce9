"""ICS calendar generation from match data."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from icalendar import Calendar, Event

from src import CalendarEvent, Match, TeamConfig

PRODUCT_ID = "adamgibbons/ics"
STAMP_TIMEZONE = ZoneInfo("Europe/Berlin")


def accuracy_stamp(now: datetime | None = None) -> str:
    """Render the generation time as e.g. ``Oct 19, 3:04 PM GMT+2`` in Berlin time."""
    if now is None:
        now = datetime.now(timezone.utc)
    local = now.astimezone(STAMP_TIMEZONE)
    hour = local.hour % 12 or 12
    return f"{local:%b} {local.day}, {hour}:{local:%M %p} {gmt_offset_name(local.utcoffset())}"


def gmt_offset_name(offset: timedelta | None) -> str:
    """Short zone name in the ``GMT+2`` / ``GMT-3:30`` form; bare ``GMT`` at zero offset."""
    if not offset:
        return "GMT"
    total = int(offset.total_seconds()) // 60
    sign = "+" if total > 0 else "-"
    hours, minutes = divmod(abs(total), 60)
    if minutes:
        return f"GMT{sign}{hours}:{minutes:02d}"
    return f"GMT{sign}{hours}"


def local_start_fields(instant: datetime) -> tuple[int, int, int, int, int]:
    """Read (year, month, day, hour, minute) of an instant in the process's local zone."""
    local = instant.astimezone()
    return (local.year, local.month, local.day, local.hour, local.minute)


def format_event(match: Match, now: datetime | None = None) -> CalendarEvent:
    """Create a calendar event from a match."""
    description = ""
    lines = match.metadata_lines
    if lines:
        description = "\n".join(lines) + "\n\n"
    description += match.url
    description += f"\n\nAccurate as of {accuracy_stamp(now)}"

    return CalendarEvent(
        title=match.title,
        start=local_start_fields(match.start_utc),
        description=description,
        uid=match.url,
        calendar_name=match.team.calendar_name,
        location=match.location,
    )


def create_team_calendar(team: TeamConfig, events: list[CalendarEvent]) -> Calendar:
    """Create an ICS calendar holding one VEVENT per event."""
    cal = Calendar()
    cal.add("prodid", PRODUCT_ID)
    cal.add("version", "2.0")
    cal.add("calscale", "GREGORIAN")
    cal.add("method", "PUBLISH")
    cal.add("x-wr-calname", team.calendar_name)

    stamp = datetime.now(timezone.utc)
    for calendar_event in events:
        cal.add_component(_create_event(calendar_event, stamp))

    return cal


def _create_event(calendar_event: CalendarEvent, stamp: datetime) -> Event:
    event = Event()
    event.add("uid", calendar_event.uid)
    event.add("summary", calendar_event.title)
    event.add("dtstamp", stamp)
    # Start fields are local wall-clock values; write them back as UTC
    start = datetime(*calendar_event.start).astimezone(timezone.utc)
    event.add("dtstart", start)
    event.add("description", calendar_event.description)
    event.add("location", calendar_event.location)
    event.add("categories", [calendar_event.calendar_name])
    return event


def validate_ics(data: bytes) -> bool:
    """Basic validation that ICS data is well-formed."""
    text = data.decode("utf-8", errors="replace")
    return text.startswith("BEGIN:VCALENDAR") and "END:VCALENDAR" in text
