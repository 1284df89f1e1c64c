from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..common.datetime_utils import format_date, format_utc_iso
from ..core.enums import CheckInType


@dataclass(frozen=True)
class CheckInEvent:
    """Domain entity: one recorded check-in. Never updated after insert."""

    id: int
    name: str
    team: str
    type: CheckInType
    date: date
    timestamp: datetime

    @property
    def date_str(self) -> str:
        return format_date(self.date)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "team": self.team,
            "type": self.type.value,
            "date": self.date_str,
            "timestamp": format_utc_iso(self.timestamp),
        }
