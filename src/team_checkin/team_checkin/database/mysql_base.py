from __future__ import annotations

from contextlib import contextmanager
from functools import wraps
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import StorageError
from .connection import DatabaseConnection

# MySQL server error for a violated UNIQUE/PRIMARY key.
ER_DUP_ENTRY = 1062


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def is_duplicate_entry(exc: Exception) -> bool:
    return getattr(exc, "errno", None) == ER_DUP_ENTRY


def translate_storage_errors(method):
    """Re-raise connector failures as StorageError; domain errors pass through."""

    @wraps(method)
    def wrapper(*args, **kwargs):
        try:
            return method(*args, **kwargs)
        except mysql.connector.Error as e:
            raise StorageError(f"{method.__name__} failed") from e

    return wrapper
