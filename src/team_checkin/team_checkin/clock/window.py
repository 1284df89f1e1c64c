from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from ..common.datetime_utils import format_date, to_china
from ..core.constants import EVENING_END_HOUR, EVENING_START_HOUR, MORNING_END_HOUR, MORNING_START_HOUR
from ..core.enums import CheckInType


@dataclass(frozen=True)
class WindowState:
    today: str
    check_in_type: Optional[CheckInType]
    display_time: str

    @property
    def is_open(self) -> bool:
        return self.check_in_type is not None

    def to_dict(self) -> dict:
        return {
            "today": self.today,
            "check_in_type": self.check_in_type.value if self.check_in_type else None,
            "display_time": self.display_time,
        }


def check_in_type_at(hour: int, minute: int) -> Optional[CheckInType]:
    """Slot open at the given UTC+8 wall-clock time, if any."""
    value = hour + minute / 60
    if MORNING_START_HOUR <= value <= MORNING_END_HOUR:
        return CheckInType.MORNING
    if EVENING_START_HOUR <= value <= EVENING_END_HOUR:
        return CheckInType.EVENING
    return None


def derive_window(now: datetime, server_offset_ms: float = 0) -> WindowState:
    local = to_china(now + timedelta(milliseconds=server_offset_ms))
    return WindowState(
        today=format_date(local.date()),
        check_in_type=check_in_type_at(local.hour, local.minute),
        display_time=local.strftime("%H:%M"),
    )
