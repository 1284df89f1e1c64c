from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..checkins.service import CheckInService
from ..common.datetime_utils import china_today, format_date, now_utc
from ..core.constants import LATEST_EVENTS_LIMIT, STATS_WINDOW_DAYS
from ..core.enums import CheckInType
from ..roster.model import Roster
from .aggregates import last_n_dates, latest_events, missing_members, team_counts, weekly_rates


class StatsService:
    """Dashboard payloads built from the stats window and the roster."""

    def __init__(self, checkins: CheckInService, roster: Roster, *, window_days: int = STATS_WINDOW_DAYS):
        self._checkins = checkins
        self._roster = roster
        self._window_days = int(window_days)

    def daily_summary(self, as_of: Optional[datetime] = None, *, latest_limit: int = LATEST_EVENTS_LIMIT) -> dict:
        as_of = as_of or now_utc()
        today = format_date(china_today(as_of))
        events = self._checkins.recent_events(as_of)

        counts = team_counts(events, self._roster, today)
        teams = []
        for team in self._roster.teams():
            c = counts[team]
            teams.append(
                {
                    "team": team,
                    "size": c.size,
                    "morning": c.morning,
                    "evening": c.evening,
                    "morning_percent": round(c.morning_percent, 1),
                    "evening_percent": round(c.evening_percent, 1),
                    "morning_missing": missing_members(events, self._roster, team, CheckInType.MORNING, today),
                    "evening_missing": missing_members(events, self._roster, team, CheckInType.EVENING, today),
                }
            )

        return {
            "date": today,
            "teams": teams,
            "latest": [e.to_dict() for e in latest_events(events, latest_limit)],
        }

    def weekly_summary(self, as_of: Optional[datetime] = None) -> dict:
        as_of = as_of or now_utc()
        today = china_today(as_of)
        events = self._checkins.recent_events(as_of)
        rates = weekly_rates(events, self._roster, today, self._window_days)
        return {
            "dates": last_n_dates(today, self._window_days),
            "teams": [rates[team].to_dict() for team in self._roster.teams()],
        }
