from __future__ import annotations

import time
from datetime import datetime
from typing import Callable, Optional

import requests

from .checkins.model import CheckInEvent
from .clock.sync import ClockSync
from .clock.window import WindowState
from .common.datetime_utils import parse_iso_date
from .core.constants import DEFAULT_CLIENT_TIMEOUT_SECONDS
from .core.enums import CheckInType
from .core.exceptions import AlreadyCheckedInError, NetworkError, StorageError, ValidationError


def _parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def event_from_dict(data: dict) -> CheckInEvent:
    return CheckInEvent(
        id=int(data["id"]),
        name=data["name"],
        team=data["team"],
        type=CheckInType(data["type"]),
        date=parse_iso_date(data["date"]),
        timestamp=_parse_timestamp(data["timestamp"]),
    )


class CheckInClient:
    """HTTP client for the check-in API.

    Failures are raised to the caller as-is; nothing is retried.
    """

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_CLIENT_TIMEOUT_SECONDS,
        clock_ms: Callable[[], float] = lambda: time.time() * 1000,
        clock_sync: Optional[ClockSync] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._timeout = timeout
        self._clock_ms = clock_ms
        self.clock = clock_sync or ClockSync()

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        try:
            return self._session.request(method, f"{self._base_url}{path}", timeout=self._timeout, **kwargs)
        except requests.RequestException as e:
            raise NetworkError(f"{method} {path} failed: {e}") from e

    def _json(self, resp: requests.Response):
        try:
            return resp.json()
        except ValueError as e:
            raise NetworkError(f"Invalid JSON from {resp.url} (HTTP {resp.status_code})") from e

    def sync_clock(self) -> float:
        """One round trip to /api/time; stores and returns the offset in ms."""
        sent = self._clock_ms()
        resp = self._request("GET", "/api/time")
        received = self._clock_ms()
        payload = self._json(resp)
        return self.clock.apply(float(payload["timestamp"]), sent, received)

    def window(self) -> WindowState:
        return self.clock.window()

    def fetch_stats(self) -> list[CheckInEvent]:
        resp = self._request("GET", "/api/stats")
        payload = self._json(resp)
        if resp.status_code != 200:
            raise StorageError(payload.get("error", "Failed to fetch stats"))
        return [event_from_dict(item) for item in payload]

    def fetch_roster(self) -> dict[str, list[str]]:
        resp = self._request("GET", "/api/roster")
        payload = self._json(resp)
        if resp.status_code != 200:
            raise StorageError(payload.get("error", "Failed to fetch roster"))
        return {entry["team"]: list(entry["members"]) for entry in payload["teams"]}

    def submit(self, *, name: str, team: str, type: CheckInType | str, date: str) -> int:
        body = {
            "name": name,
            "team": team,
            "type": type.value if isinstance(type, CheckInType) else type,
            "date": date,
        }
        resp = self._request("POST", "/api/checkin", json=body)
        payload = self._json(resp)
        if resp.status_code == 200 and payload.get("success"):
            return int(payload["id"])

        message = payload.get("error", "Check-in failed")
        code = payload.get("code")
        if code == AlreadyCheckedInError.code:
            raise AlreadyCheckedInError(message)
        if resp.status_code == 400:
            raise ValidationError(message)
        raise StorageError(message)

    def check_in_now(self, *, name: str, team: str) -> int:
        """Submit for the slot open right now on the synced clock."""
        state = self.window()
        if state.check_in_type is None:
            raise ValidationError(f"No check-in window open at {state.display_time}")
        return self.submit(name=name, team=team, type=state.check_in_type, date=state.today)
