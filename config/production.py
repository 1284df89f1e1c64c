import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "checkin_db"),
}

DEBUG = False

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3007"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

ROSTER_FILE = os.getenv("ROSTER_FILE", "")
ENFORCE_ROSTER = bool(int(os.getenv("ENFORCE_ROSTER", "0")))
