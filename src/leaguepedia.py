"""Leaguepedia Cargo client for a team's upcoming matches."""

from __future__ import annotations

import html
import re
from datetime import datetime
from urllib.parse import quote

import requests

from src import LeaguepediaError, Match, TeamConfig

API_URL = "https://lol.fandom.com/api.php"
USER_AGENT = "geng-cal/0.1 (contact: gengcal@example.com)"
REQUEST_TIMEOUT = 30
DEFAULT_LIMIT = 20

CARGO_FIELDS = [
    "DateTime_UTC=DateTime UTC",
    "Team1",
    "Team2",
    "OverviewPage",
    "BestOf",
    "Round",
    "Stream",
    "HasTime",
]

# Characters left untouched when percent-encoding a wiki page path
_URI_SAFE = ";,/?:@&=+$!*'()#"


def build_query_params(team: TeamConfig, limit: int = DEFAULT_LIMIT) -> dict[str, str]:
    """Build Cargo query parameters for the team's future matches."""
    return {
        "action": "cargoquery",
        "format": "json",
        "tables": "MatchSchedule",
        "fields": ",".join(CARGO_FIELDS),
        "where": f'(Team1="{team.name}" OR Team2="{team.name}") AND DateTime_UTC > NOW()',
        "order_by": "DateTime_UTC",
        "limit": str(limit),
    }


def query_cargo(team: TeamConfig, limit: int = DEFAULT_LIMIT) -> list[dict]:
    """Run the MatchSchedule query and return raw Cargo rows.

    Raises LeaguepediaError on a non-success status. Transport failures
    surface as the usual requests exceptions.
    """
    headers = {"User-Agent": USER_AGENT}
    response = requests.get(
        API_URL,
        params=build_query_params(team, limit),
        headers=headers,
        timeout=REQUEST_TIMEOUT,
    )
    if not response.ok:
        raise LeaguepediaError(response.status_code, response.reason)
    return parse_cargo_response(response.json())


def parse_cargo_response(payload: dict | None) -> list[dict]:
    """Unwrap the ``title`` objects of a cargoquery response."""
    if not payload:
        return []
    return [item["title"] for item in payload.get("cargoquery") or []]


def fetch_team_matches(team: TeamConfig, limit: int = DEFAULT_LIMIT) -> list[Match]:
    """Fetch upcoming matches for a team from Leaguepedia."""
    rows = query_cargo(team, limit)
    return [normalize_row(row, team) for row in rows]


def normalize_row(row: dict, team: TeamConfig) -> Match:
    """Turn one Cargo row into a Match."""
    team1 = html.unescape(row.get("Team1") or "")
    team2 = html.unescape(row.get("Team2") or "")
    is_home = team1 == team.name

    best_of = parse_best_of(row.get("BestOf"))
    round_name = str(row["Round"]) if row.get("Round") else None
    stream = str(row["Stream"]) if row.get("Stream") else None

    return Match(
        team=team,
        team1=team1,
        team2=team2,
        opponent=team2 if is_home else team1,
        is_home=is_home,
        start_utc=parse_utc_timestamp(row["DateTime UTC"]),
        has_exact_time=has_exact_time(row.get("HasTime")),
        url=wiki_url(row.get("OverviewPage") or "", team.wiki_base),
        best_of=best_of,
        round=round_name,
        stream=stream,
    )


def parse_best_of(value: object) -> int | None:
    """Series length from BestOf; Cargo may send ``"3"``, ``"3.0"`` or ``3``."""
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return int(float(text))


def has_exact_time(value: object) -> bool:
    """Cargo reports HasTime as a bool, an int or a string depending on the row."""
    if isinstance(value, bool):
        return value
    return value == 1 or value == "1"


def parse_utc_timestamp(value: str) -> datetime:
    """Parse a naive ``YYYY-MM-DD HH:MM:SS`` UTC string into an aware datetime."""
    return datetime.fromisoformat(f"{value}Z")


def wiki_url(page: str, base: str = "https://lol.fandom.com/wiki/") -> str:
    """Canonical wiki URL for an OverviewPage title."""
    path = re.sub(r"\s", "_", page)
    return base + quote(path, safe=_URI_SAFE)
