"""Pure aggregates over a check-in snapshot and a roster.

Counts are distinct roster members; for each team and slot the checked-in
and missing lists partition the roster.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Sequence

from ..checkins.model import CheckInEvent
from ..common.datetime_utils import format_date, parse_iso_date
from ..core.constants import LATEST_EVENTS_LIMIT, STATS_WINDOW_DAYS
from ..core.enums import CheckInType
from ..roster.model import Roster


def _percent(part: int, whole: int) -> float:
    return part / whole * 100 if whole else 0.0


@dataclass(frozen=True)
class TeamCount:
    team: str
    morning: int
    evening: int
    size: int

    @property
    def morning_percent(self) -> float:
        return _percent(self.morning, self.size)

    @property
    def evening_percent(self) -> float:
        return _percent(self.evening, self.size)


@dataclass(frozen=True)
class DailyRate:
    date: str
    morning: int
    evening: int
    size: int
    morning_missing: tuple[str, ...] = ()
    evening_missing: tuple[str, ...] = ()

    @property
    def combined_percent(self) -> float:
        return _percent(self.morning + self.evening, 2 * self.size)

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "morning": self.morning,
            "evening": self.evening,
            "combined_percent": round(self.combined_percent, 1),
            "morning_missing": list(self.morning_missing),
            "evening_missing": list(self.evening_missing),
        }


@dataclass(frozen=True)
class WeeklyRate:
    team: str
    size: int
    days: tuple[DailyRate, ...]

    @property
    def morning_percent(self) -> float:
        return _percent(sum(d.morning for d in self.days), self.size * len(self.days))

    @property
    def evening_percent(self) -> float:
        return _percent(sum(d.evening for d in self.days), self.size * len(self.days))

    def to_dict(self) -> dict:
        return {
            "team": self.team,
            "size": self.size,
            "morning_percent": round(self.morning_percent, 1),
            "evening_percent": round(self.evening_percent, 1),
            "days": [d.to_dict() for d in self.days],
        }


def _day_str(day: date | str) -> str:
    return day if isinstance(day, str) else format_date(day)


def checked_in_members(events: Iterable[CheckInEvent], team: str, type: CheckInType, day: date | str) -> set[str]:
    day_s = _day_str(day)
    return {e.name for e in events if e.team == team and e.type == type and e.date_str == day_s}


def missing_members(
    events: Iterable[CheckInEvent], roster: Roster, team: str, type: CheckInType, day: date | str
) -> list[str]:
    """Roster members of `team` without a `type` check-in on `day`, in roster order."""
    checked = checked_in_members(events, team, type, day)
    return [m for m in roster.members_of(team) if m not in checked]


def _roster_count(events: Sequence[CheckInEvent], roster: Roster, team: str, type: CheckInType, day: str) -> int:
    checked = checked_in_members(events, team, type, day)
    return sum(1 for m in roster.members_of(team) if m in checked)


def team_counts(events: Iterable[CheckInEvent], roster: Roster, day: date | str) -> dict[str, TeamCount]:
    snapshot = list(events)
    day_s = _day_str(day)
    return {
        team: TeamCount(
            team=team,
            morning=_roster_count(snapshot, roster, team, CheckInType.MORNING, day_s),
            evening=_roster_count(snapshot, roster, team, CheckInType.EVENING, day_s),
            size=roster.size(team),
        )
        for team in roster.teams()
    }


def last_n_dates(today: date | str, n: int = STATS_WINDOW_DAYS) -> list[str]:
    """Today first, then each earlier day."""
    start = parse_iso_date(today) if isinstance(today, str) else today
    return [format_date(start - timedelta(days=i)) for i in range(n)]


def weekly_rates(
    events: Iterable[CheckInEvent], roster: Roster, today: date | str, days: int = STATS_WINDOW_DAYS
) -> dict[str, WeeklyRate]:
    snapshot = list(events)
    dates = last_n_dates(today, days)
    result: dict[str, WeeklyRate] = {}
    for team in roster.teams():
        daily = tuple(
            DailyRate(
                date=d,
                morning=_roster_count(snapshot, roster, team, CheckInType.MORNING, d),
                evening=_roster_count(snapshot, roster, team, CheckInType.EVENING, d),
                size=roster.size(team),
                morning_missing=tuple(missing_members(snapshot, roster, team, CheckInType.MORNING, d)),
                evening_missing=tuple(missing_members(snapshot, roster, team, CheckInType.EVENING, d)),
            )
            for d in dates
        )
        result[team] = WeeklyRate(team=team, size=roster.size(team), days=daily)
    return result


def latest_events(events: Sequence[CheckInEvent], limit: int = LATEST_EVENTS_LIMIT) -> list[CheckInEvent]:
    """First `limit` entries of a newest-first snapshot."""
    return list(events[:limit])
