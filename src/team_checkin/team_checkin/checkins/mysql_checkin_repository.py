from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional, Sequence

import mysql.connector

from ..core.enums import CheckInType
from ..core.exceptions import AlreadyCheckedInError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_entry, translate_storage_errors
from .model import CheckInEvent
from .repository import CheckInRepository


def _row_to_event(r: dict) -> CheckInEvent:
    # DATETIME columns come back naive; they are stored in UTC.
    ts = r["timestamp"]
    if isinstance(ts, datetime) and ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return CheckInEvent(
        id=int(r["id"]),
        name=r["name"],
        team=r["team"],
        type=CheckInType(r["type"]),
        date=r["date"],
        timestamp=ts,
    )


class MySQLCheckInRepository(CheckInRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @translate_storage_errors
    def find(self, *, name: str, team: str, type: CheckInType, day: date) -> Optional[CheckInEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, name, team, type, `date`, `timestamp`
                FROM checkins
                WHERE name=%s AND team=%s AND type=%s AND `date`=%s
                """,
                (name, team, type.value, day),
            )
            r = fetchone(cur)
            return _row_to_event(r) if r else None

    @translate_storage_errors
    def create(self, *, name: str, team: str, type: CheckInType, day: date, timestamp: datetime) -> int:
        stored_ts = timestamp.astimezone(timezone.utc).replace(tzinfo=None)
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO checkins(name, team, type, `date`, `timestamp`)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (name, team, type.value, day, stored_ts),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            if is_duplicate_entry(e):
                raise AlreadyCheckedInError() from e
            raise

    @translate_storage_errors
    def list_since(self, *, start_date: date) -> Sequence[CheckInEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, name, team, type, `date`, `timestamp`
                FROM checkins
                WHERE `date` >= %s
                ORDER BY `timestamp` DESC, id DESC
                """,
                (start_date,),
            )
            return [_row_to_event(r) for r in fetchall(cur)]
