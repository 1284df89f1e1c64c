import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "checkin_db"),
}

DEBUG = True

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3007"))

# Creates the checkins table on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# JSON object of team -> [member, ...]; empty uses the built-in roster
ROSTER_FILE = os.getenv("ROSTER_FILE", "")
# Reject check-ins whose team/name are not on the roster
ENFORCE_ROSTER = bool(int(os.getenv("ENFORCE_ROSTER", "0")))
