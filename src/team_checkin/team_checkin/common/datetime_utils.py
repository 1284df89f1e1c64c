from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from ..core.constants import CHINA_TZ, DATE_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def now_utc() -> datetime:
    """Current aware UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def to_china(moment: datetime) -> datetime:
    """Convert an instant to UTC+8 civil time. Naive values are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(CHINA_TZ)


def china_today(moment: datetime | None = None) -> date:
    return to_china(moment or now_utc()).date()


def days_back(day: date, days: int) -> date:
    return day - timedelta(days=days)


def epoch_ms(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return int(moment.timestamp() * 1000)


def format_utc_iso(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a Z suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"
