from __future__ import annotations

from datetime import date, datetime
from typing import Optional

import pytest

from src.team_checkin.team_checkin.checkins.model import CheckInEvent
from src.team_checkin.team_checkin.checkins.service import CheckInService
from src.team_checkin.team_checkin.core.enums import CheckInType
from src.team_checkin.team_checkin.core.exceptions import AlreadyCheckedInError
from src.team_checkin.team_checkin.roster.model import Roster


class InMemoryCheckIns:
    def __init__(self):
        self._by_slot: dict[tuple[str, str, CheckInType, date], CheckInEvent] = {}
        self._id = 0
        self.calls: list[str] = []

    def find(self, *, name: str, team: str, type: CheckInType, day: date) -> Optional[CheckInEvent]:
        self.calls.append("find")
        return self._by_slot.get((name, team, type, day))

    def create(self, *, name: str, team: str, type: CheckInType, day: date, timestamp: datetime) -> int:
        self.calls.append("create")
        key = (name, team, type, day)
        if key in self._by_slot:
            raise AlreadyCheckedInError()
        self._id += 1
        self._by_slot[key] = CheckInEvent(id=self._id, name=name, team=team, type=type, date=day, timestamp=timestamp)
        return self._id

    def list_since(self, *, start_date: date):
        self.calls.append("list_since")
        items = [e for e in self._by_slot.values() if e.date >= start_date]
        items.sort(key=lambda e: (e.timestamp, e.id), reverse=True)
        return items

    def count(self) -> int:
        return len(self._by_slot)


@pytest.fixture
def roster() -> Roster:
    return Roster.from_mapping(
        {
            "Alpha": ["Ann", "Bob", "Cid", "Dee", "Eve"],
            "Beta": ["Fay", "Gus"],
        }
    )


@pytest.fixture
def repo() -> InMemoryCheckIns:
    return InMemoryCheckIns()


@pytest.fixture
def service(repo, roster) -> CheckInService:
    return CheckInService(repo, roster)
