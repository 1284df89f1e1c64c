from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import CheckInType
from .model import CheckInEvent


class CheckInRepository(Protocol):
    def find(self, *, name: str, team: str, type: CheckInType, day: date) -> Optional[CheckInEvent]:
        raise NotImplementedError

    def create(self, *, name: str, team: str, type: CheckInType, day: date, timestamp: datetime) -> int:
        """Insert a check-in and return its id.

        Raises AlreadyCheckedInError if the (name, team, type, date) slot is taken.
        """

        raise NotImplementedError

    def list_since(self, *, start_date: date) -> Sequence[CheckInEvent]:
        """Events with date >= start_date, newest timestamp first."""

        raise NotImplementedError
