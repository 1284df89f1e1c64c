from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable, Optional

from ..common.datetime_utils import now_utc
from .window import WindowState, derive_window


def compute_offset_ms(server_timestamp_ms: float, sent_ms: float, received_ms: float) -> float:
    """Offset to add to the local clock to match the server clock.

    The server stamp is assumed to be taken halfway through the round trip.
    """
    latency = (received_ms - sent_ms) / 2
    return (server_timestamp_ms + latency) - received_ms


class ClockSync:
    """Local clock corrected by a one-shot server offset.

    The offset is measured once (see CheckInClient.sync_clock) and applied to
    every later read; it is never refreshed automatically.
    """

    def __init__(self, *, clock: Callable[[], datetime] = now_utc, offset_ms: float = 0):
        self._clock = clock
        self._offset_ms = float(offset_ms)

    @property
    def offset_ms(self) -> float:
        return self._offset_ms

    def apply(self, server_timestamp_ms: float, sent_ms: float, received_ms: float) -> float:
        self._offset_ms = compute_offset_ms(server_timestamp_ms, sent_ms, received_ms)
        return self._offset_ms

    def now(self) -> datetime:
        return self._clock() + timedelta(milliseconds=self._offset_ms)

    def window(self, at: Optional[datetime] = None) -> WindowState:
        return derive_window(at or self._clock(), self._offset_ms)
