#!/usr/bin/env python3
"""
Gen.G Match Calendar Generator

Queries Leaguepedia for Gen.G's upcoming League of Legends matches and
writes them to GenG.ics in the working directory.

An empty or malformed ICS serialization is an error (exit code 1) rather
than a skipped write, so a broken calendar never passes as a clean run.
"""

from __future__ import annotations

import sys
from pathlib import Path

from src import CalendarError, NoEventsError, TeamConfig
from src.calendar_gen import create_team_calendar, format_event, validate_ics
from src.leaguepedia import DEFAULT_LIMIT, fetch_team_matches

GEN_G = TeamConfig(name="Gen.G", calendar_name="Gen.G (LoL)")
OUTPUT_PATH = Path("GenG.ics")


def build_calendar(team: TeamConfig, limit: int = DEFAULT_LIMIT) -> bytes:
    """Fetch the team's matches and serialize them to ICS bytes."""
    print(f"Fetching {team.name} matches from Leaguepedia...")
    matches = fetch_team_matches(team, limit)
    if not matches:
        raise NoEventsError()
    print(f"  Found {len(matches)} upcoming matches")

    events = [format_event(m) for m in matches]

    print("\nDetailed events:")
    for event in events:
        year, month, day, hour, minute = event.start
        print(f"  {year:04d}-{month:02d}-{day:02d} {hour:02d}:{minute:02d}  {event.title}")
        print(f"    {event.uid}")

    ics_bytes = create_team_calendar(team, events).to_ical()
    if not ics_bytes or not validate_ics(ics_bytes):
        raise CalendarError("Generated ICS failed validation")
    return ics_bytes


def write_calendar(path: Path, data: bytes) -> None:
    """Overwrite the calendar file."""
    path.write_bytes(data)


def main() -> int:
    try:
        ics_bytes = build_calendar(GEN_G)
        write_calendar(OUTPUT_PATH, ics_bytes)
        print(f"\nSaved {OUTPUT_PATH}")
    except Exception as e:
        print(f"ERROR: Failed to generate {GEN_G.name} calendar: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
