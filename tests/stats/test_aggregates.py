from __future__ import annotations

from datetime import date, datetime, timezone
from itertools import count

import pytest

from src.team_checkin.team_checkin.checkins.model import CheckInEvent
from src.team_checkin.team_checkin.common.datetime_utils import parse_iso_date
from src.team_checkin.team_checkin.core.enums import CheckInType
from src.team_checkin.team_checkin.roster.model import Roster
from src.team_checkin.team_checkin.stats.aggregates import (
    last_n_dates,
    latest_events,
    missing_members,
    team_counts,
    weekly_rates,
)

_ids = count(1)

M = CheckInType.MORNING
E = CheckInType.EVENING


def ev(name: str, team: str, type: CheckInType, day: str) -> CheckInEvent:
    return CheckInEvent(
        id=next(_ids),
        name=name,
        team=team,
        type=type,
        date=parse_iso_date(day),
        timestamp=datetime(2026, 10, 19, tzinfo=timezone.utc),
    )


TODAY = "2026-10-19"


def test_missing_members_keeps_roster_order(roster):
    events = [ev("Dee", "Alpha", M, TODAY), ev("Ann", "Alpha", M, TODAY), ev("Cid", "Alpha", M, TODAY)]

    assert missing_members(events, roster, "Alpha", M, TODAY) == ["Bob", "Eve"]
    assert missing_members(events, roster, "Alpha", E, TODAY) == ["Ann", "Bob", "Cid", "Dee", "Eve"]


def test_missing_members_ignores_other_days_and_teams(roster):
    events = [ev("Ann", "Alpha", M, "2026-10-18"), ev("Bob", "Beta", M, TODAY)]

    assert missing_members(events, roster, "Alpha", M, date(2026, 10, 19)) == ["Ann", "Bob", "Cid", "Dee", "Eve"]


def test_team_counts_count_distinct_roster_members(roster):
    events = [
        ev("Ann", "Alpha", M, TODAY),
        ev("Ann", "Alpha", M, TODAY),  # duplicate from a lost race
        ev("Bob", "Alpha", M, TODAY),
        ev("Zed", "Alpha", M, TODAY),  # not on the roster
        ev("Fay", "Beta", E, TODAY),
        ev("Gus", "Beta", E, "2026-10-18"),
    ]

    counts = team_counts(events, roster, TODAY)

    assert list(counts) == ["Alpha", "Beta"]
    assert (counts["Alpha"].morning, counts["Alpha"].evening, counts["Alpha"].size) == (2, 0, 5)
    assert counts["Alpha"].morning_percent == pytest.approx(40.0)
    assert (counts["Beta"].morning, counts["Beta"].evening) == (0, 1)
    assert counts["Beta"].evening_percent == pytest.approx(50.0)


def test_last_n_dates_goes_back_from_today():
    assert last_n_dates("2026-03-02", 4) == ["2026-03-02", "2026-03-01", "2026-02-28", "2026-02-27"]
    assert len(last_n_dates(date(2026, 10, 19))) == 7


def test_weekly_rates_average_over_members_and_days(roster):
    events = [
        ev("Fay", "Beta", M, "2026-10-19"),
        ev("Gus", "Beta", M, "2026-10-19"),
        ev("Fay", "Beta", E, "2026-10-19"),
        ev("Fay", "Beta", M, "2026-10-15"),
        ev("Gus", "Beta", M, "2026-10-12"),  # outside the last 7 dates
    ]

    rates = weekly_rates(events, roster, TODAY)
    beta = rates["Beta"]

    # 3 morning check-ins over 2 members x 7 days
    assert beta.morning_percent == pytest.approx(3 / 14 * 100)
    assert beta.evening_percent == pytest.approx(1 / 14 * 100)
    assert [d.date for d in beta.days][0] == TODAY
    assert beta.days[0].combined_percent == pytest.approx(75.0)
    assert beta.days[0].evening_missing == ("Gus",)
    assert beta.days[4].date == "2026-10-15"
    assert beta.days[4].morning_missing == ("Gus",)
    assert rates["Alpha"].days[0].morning_missing == ("Ann", "Bob", "Cid", "Dee", "Eve")
    assert beta.to_dict()["morning_percent"] == 21.4

    assert rates["Alpha"].morning_percent == 0.0


def test_weekly_rates_empty_team_is_zero():
    empty = Roster.from_mapping({"Solo": []})
    rates = weekly_rates([], empty, TODAY)

    assert rates["Solo"].morning_percent == 0.0
    assert rates["Solo"].days[0].combined_percent == 0.0


def test_latest_events_takes_head_of_snapshot():
    events = [ev("Ann", "Alpha", M, TODAY) for _ in range(12)]

    assert latest_events(events) == events[:10]
    assert latest_events(events, 3) == events[:3]
