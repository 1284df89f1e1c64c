from __future__ import annotations

from enum import Enum


class CheckInType(str, Enum):
    """Half-day slot a check-in belongs to."""

    MORNING = "morning"
    EVENING = "evening"
