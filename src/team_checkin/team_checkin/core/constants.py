"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import timedelta, timezone

# China Standard Time, fixed offset (no DST).
CHINA_TZ = timezone(timedelta(hours=8), name="Asia/Shanghai")

DATE_FORMAT = "%Y-%m-%d"

STATS_WINDOW_DAYS = 7
LATEST_EVENTS_LIMIT = 10

# Check-in windows as fractional hours, inclusive on both ends.
MORNING_START_HOUR = 6.5
MORNING_END_HOUR = 10.0
EVENING_START_HOUR = 20.0
EVENING_END_HOUR = 23.5

DEFAULT_PORT = 3007
DEFAULT_CLIENT_TIMEOUT_SECONDS = 10.0
