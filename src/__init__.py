"""Gen.G Calendar — shared data models and errors."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class TeamConfig:
    """Configuration for the tracked team."""

    name: str
    calendar_name: str
    wiki_base: str = "https://lol.fandom.com/wiki/"


@dataclass
class Match:
    """A single upcoming match, normalized from a Cargo row."""

    team: TeamConfig
    team1: str
    team2: str
    opponent: str
    is_home: bool
    start_utc: datetime
    has_exact_time: bool
    url: str
    best_of: int | None = None
    round: str | None = None
    stream: str | None = None
    location: str = ""

    @property
    def title(self) -> str:
        if self.is_home:
            return f"{self.team.name} vs. {self.opponent}"
        return f"{self.opponent} vs. {self.team.name}"

    @property
    def metadata_lines(self) -> list[str]:
        lines = [
            f"Best of {self.best_of}" if self.best_of else None,
            f"Round: {self.round}" if self.round else None,
            "Time: exact" if self.has_exact_time else "Time: date only (TBD)",
            f"Stream: {self.stream}" if self.stream else None,
            f"Overview: {self.url}",
        ]
        return [line for line in lines if line is not None]


@dataclass
class CalendarEvent:
    """A calendar event ready for ICS serialization.

    ``start`` holds (year, month, day, hour, minute) as read from the local
    calendar of the running process.
    """

    title: str
    start: tuple[int, int, int, int, int]
    description: str
    uid: str
    calendar_name: str
    location: str = ""


class CalendarGeneratorError(Exception):
    """Base class for errors that abort a calendar run."""


class LeaguepediaError(CalendarGeneratorError):
    """The Cargo API answered with a non-success status."""

    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Leaguepedia error: {status_code} {reason}")


class NoEventsError(CalendarGeneratorError):
    """The query succeeded but returned no matches."""

    def __init__(self, message: str = "No events retrieved") -> None:
        super().__init__(message)


class CalendarError(CalendarGeneratorError):
    """Serialization did not produce a usable calendar."""
