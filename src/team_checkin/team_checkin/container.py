from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .checkins.mysql_checkin_repository import MySQLCheckInRepository
from .checkins.repository import CheckInRepository
from .checkins.service import CheckInService
from .database.connection import DBConfig, DatabaseConnection
from .roster.model import Roster
from .stats.service import StatsService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    roster: Roster
    checkins_repo: CheckInRepository

    checkin_service: CheckInService
    stats_service: StatsService


def build_services(
    *,
    checkins_repo: CheckInRepository,
    roster: Roster,
    enforce_roster: bool = False,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    checkin_service = CheckInService(checkins_repo, roster, enforce_roster=enforce_roster)
    stats_service = StatsService(checkin_service, roster)

    return Container(
        conn=conn,
        roster=roster,
        checkins_repo=checkins_repo,
        checkin_service=checkin_service,
        stats_service=stats_service,
    )


def build_container(*, db_config: dict, roster: Roster, enforce_roster: bool = False) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        checkins_repo=MySQLCheckInRepository(conn),
        roster=roster,
        enforce_roster=enforce_roster,
        conn=conn,
    )
