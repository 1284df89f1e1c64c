from __future__ import annotations

from datetime import datetime, timezone

import pytest
import requests

from src.team_checkin.team_checkin.client import CheckInClient
from src.team_checkin.team_checkin.clock.sync import ClockSync
from src.team_checkin.team_checkin.core.enums import CheckInType
from src.team_checkin.team_checkin.core.exceptions import (
    AlreadyCheckedInError,
    NetworkError,
    StorageError,
    ValidationError,
)


class FakeResponse:
    def __init__(self, status_code: int, payload, url: str = "http://test"):
        self.status_code = status_code
        self._payload = payload
        self.url = url

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    def __init__(self, responses: dict):
        self._responses = responses
        self.requests: list[tuple[str, str, dict]] = []

    def request(self, method, url, timeout=None, **kwargs):
        self.requests.append((method, url, kwargs))
        result = self._responses[(method, url.split("http://test", 1)[1])]
        if isinstance(result, Exception):
            raise result
        return result


def make_client(responses: dict, **kwargs) -> tuple[CheckInClient, FakeSession]:
    session = FakeSession(responses)
    return CheckInClient("http://test/", session=session, **kwargs), session


def test_sync_clock_uses_half_round_trip():
    ticks = iter([1_000.0, 1_200.0])
    base = datetime(2026, 10, 18, 22, 29, 0, tzinfo=timezone.utc)  # 06:29 UTC+8
    client, _ = make_client(
        {("GET", "/api/time"): FakeResponse(200, {"timestamp": 91_000})},
        clock_ms=lambda: next(ticks),
        clock_sync=ClockSync(clock=lambda: base),
    )

    offset = client.sync_clock()

    assert offset == 89_900
    assert client.window().check_in_type is CheckInType.MORNING


def test_fetch_stats_parses_events():
    row = {
        "id": 3,
        "name": "Ann",
        "team": "Alpha",
        "type": "morning",
        "date": "2026-10-19",
        "timestamp": "2026-10-19T00:45:00.000Z",
    }
    client, _ = make_client({("GET", "/api/stats"): FakeResponse(200, [row])})

    (event,) = client.fetch_stats()

    assert event.type is CheckInType.MORNING
    assert event.timestamp == datetime(2026, 10, 19, 0, 45, tzinfo=timezone.utc)
    assert event.to_dict() == row


def test_fetch_stats_error_response():
    client, _ = make_client({("GET", "/api/stats"): FakeResponse(500, {"error": "Failed to fetch stats"})})

    with pytest.raises(StorageError):
        client.fetch_stats()


def test_submit_posts_body_and_returns_id():
    client, session = make_client({("POST", "/api/checkin"): FakeResponse(200, {"success": True, "id": 9})})

    assert client.submit(name="Ann", team="Alpha", type=CheckInType.EVENING, date="2026-10-19") == 9
    _, url, kwargs = session.requests[0]
    assert url == "http://test/api/checkin"
    assert kwargs["json"] == {"name": "Ann", "team": "Alpha", "type": "evening", "date": "2026-10-19"}


@pytest.mark.parametrize(
    "response, error",
    [
        (FakeResponse(400, {"error": "今日已打卡", "code": "already_checked_in"}), AlreadyCheckedInError),
        (FakeResponse(400, {"error": "Missing required fields", "code": "missing_fields"}), ValidationError),
        (FakeResponse(500, {"error": "Check-in failed", "code": "storage_failure"}), StorageError),
        (FakeResponse(502, ValueError("not json")), NetworkError),
        (requests.ConnectionError("refused"), NetworkError),
    ],
)
def test_submit_failures_are_raised_without_retry(response, error):
    client, session = make_client({("POST", "/api/checkin"): response})

    with pytest.raises(error):
        client.submit(name="Ann", team="Alpha", type="morning", date="2026-10-19")
    assert len(session.requests) == 1


def test_check_in_now_refuses_outside_window():
    noon = datetime(2026, 10, 19, 4, 0, tzinfo=timezone.utc)  # 12:00 UTC+8
    client, session = make_client({}, clock_sync=ClockSync(clock=lambda: noon))

    with pytest.raises(ValidationError):
        client.check_in_now(name="Ann", team="Alpha")
    assert session.requests == []


def test_check_in_now_submits_open_slot():
    evening = datetime(2026, 10, 19, 13, 0, tzinfo=timezone.utc)  # 21:00 UTC+8
    client, session = make_client(
        {("POST", "/api/checkin"): FakeResponse(200, {"success": True, "id": 1})},
        clock_sync=ClockSync(clock=lambda: evening),
    )

    client.check_in_now(name="Ann", team="Alpha")

    assert session.requests[0][2]["json"]["type"] == "evening"
    assert session.requests[0][2]["json"]["date"] == "2026-10-19"


def test_fetch_roster():
    client, _ = make_client(
        {("GET", "/api/roster"): FakeResponse(200, {"teams": [{"team": "Alpha", "members": ["Ann"]}]})}
    )

    assert client.fetch_roster() == {"Alpha": ["Ann"]}


def test_fetch_roster_error_response():
    client, _ = make_client({("GET", "/api/roster"): FakeResponse(500, {"error": "Internal Server Error"})})

    with pytest.raises(StorageError, match="Internal Server Error"):
        client.fetch_roster()
