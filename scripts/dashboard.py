"""Print today's check-in board from a running server.

Usage: python scripts/dashboard.py [BASE_URL]   (default http://127.0.0.1:3007)
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.team_checkin.team_checkin.client import CheckInClient
from src.team_checkin.team_checkin.core.enums import CheckInType
from src.team_checkin.team_checkin.core.exceptions import DomainError
from src.team_checkin.team_checkin.roster.loader import roster_from_data
from src.team_checkin.team_checkin.stats.aggregates import missing_members, team_counts, weekly_rates


def main() -> None:
    base_url = sys.argv[1] if len(sys.argv) > 1 else "http://127.0.0.1:3007"
    client = CheckInClient(base_url)

    try:
        offset = client.sync_clock()
        roster = roster_from_data(client.fetch_roster())
        events = client.fetch_stats()
    except DomainError as e:
        raise SystemExit(f"ERROR: {e}")

    state = client.window()
    open_slot = state.check_in_type.value if state.check_in_type else "closed"
    print(f"{state.today} {state.display_time} (UTC+8, offset {offset:+.0f} ms) window: {open_slot}")

    counts = team_counts(events, roster, state.today)
    rates = weekly_rates(events, roster, state.today)
    for team in roster.teams():
        c = counts[team]
        w = rates[team]
        print(
            f"- {team}: morning {c.morning}/{c.size}  evening {c.evening}/{c.size}  "
            f"7d {w.morning_percent:.1f}% / {w.evening_percent:.1f}%"
        )
        for slot in CheckInType:
            missing = missing_members(events, roster, team, slot, state.today)
            if missing:
                print(f"    missing {slot.value}: {', '.join(missing)}")


if __name__ == "__main__":
    main()
