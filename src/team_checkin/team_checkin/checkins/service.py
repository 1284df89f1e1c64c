from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from ..common.datetime_utils import china_today, days_back, now_utc
from ..common.validators import require_choice, require_iso_date, require_present
from ..core.constants import STATS_WINDOW_DAYS
from ..core.enums import CheckInType
from ..core.exceptions import AlreadyCheckedInError, ValidationError
from ..roster.model import Roster
from .model import CheckInEvent
from .repository import CheckInRepository


class CheckInService:
    """Records check-ins and serves the trailing stats window.

    One event per (name, team, type, date): the service reads before it
    inserts, and the store's unique key catches requests that race past the
    read.
    """

    def __init__(
        self,
        checkins: CheckInRepository,
        roster: Roster,
        *,
        enforce_roster: bool = False,
        window_days: int = STATS_WINDOW_DAYS,
    ):
        self._checkins = checkins
        self._roster = roster
        self._enforce_roster = bool(enforce_roster)
        self._window_days = int(window_days)

    def _validate(self, name: Any, team: Any, type: Any, day: Any) -> tuple[str, str, CheckInType, date]:
        # Presence is checked for all four fields before any format check.
        name_s = require_present(name)
        team_s = require_present(team)
        type_s = require_present(type)
        day_s = require_present(day)

        check_in_type = require_choice(type_s, CheckInType, "type")
        work_date = require_iso_date(day_s, "date")

        if self._enforce_roster:
            if not self._roster.has_team(team_s):
                raise ValidationError(f"Unknown team: {team_s}")
            if not self._roster.has_member(team_s, name_s):
                raise ValidationError(f"{name_s} is not a member of team {team_s}")

        return name_s, team_s, check_in_type, work_date

    def submit(self, name: Any, team: Any, type: Any, day: Any, *, now: datetime | None = None) -> int:
        """Record a check-in and return its id.

        Raises MissingFieldError/ValidationError before touching the store,
        AlreadyCheckedInError if the slot is taken, StorageError on I/O failure.
        """
        name_s, team_s, check_in_type, work_date = self._validate(name, team, type, day)

        existing = self._checkins.find(name=name_s, team=team_s, type=check_in_type, day=work_date)
        if existing:
            raise AlreadyCheckedInError()

        return self._checkins.create(
            name=name_s,
            team=team_s,
            type=check_in_type,
            day=work_date,
            timestamp=now or now_utc(),
        )

    def is_checked_in(self, name: Any, team: Any, type: Any, day: Any) -> bool:
        name_s, team_s, check_in_type, work_date = self._validate(name, team, type, day)
        return self._checkins.find(name=name_s, team=team_s, type=check_in_type, day=work_date) is not None

    def stats_cutoff(self, as_of: Optional[datetime] = None) -> date:
        """Oldest date still inside the stats window, in UTC+8."""
        return days_back(china_today(as_of or now_utc()), self._window_days)

    def recent_events(self, as_of: Optional[datetime] = None) -> list[CheckInEvent]:
        return list(self._checkins.list_since(start_date=self.stats_cutoff(as_of)))
