# core/db.py
from __future__ import annotations

import contextlib
import sqlite3
from typing import Sequence

import pandas as pd

from . import config

DB_PATH = config.DB_PATH


# ------------------------------ Connection ------------------------------

@contextlib.contextmanager
def get_conn():
    """Yield a SQLite connection with Row factory. Use `with get_conn() as conn:` everywhere."""
    conn = sqlite3.connect(DB_PATH, check_same_thread=False)
    try:
        conn.row_factory = sqlite3.Row
        yield conn
        conn.commit()
    finally:
        conn.close()


# ------------------------------ Helpers ---------------------------------

def read_df(sql: str, params: Sequence | None = None) -> pd.DataFrame:
    with get_conn() as conn:
        return pd.read_sql_query(sql, conn, params=params or ())

def exec_sql(sql: str, params: Sequence | None = None) -> None:
    with get_conn() as conn:
        conn.execute(sql, params or ())


# ------------------------------ Schema ----------------------------------

def ensure_base_schema() -> None:
    """Create every table the app uses. Idempotent, safe to call on each rerun."""
    with get_conn() as conn:
        cur = conn.cursor()
        cur.execute("""
            CREATE TABLE IF NOT EXISTS snapshots(
                key TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                created_at TEXT NOT NULL,
                value TEXT NOT NULL
            )
        """)
        cur.execute("CREATE INDEX IF NOT EXISTS idx_snapshots_user ON snapshots(user_id)")
        cur.execute("""
            CREATE TABLE IF NOT EXISTS app_settings(
                name TEXT PRIMARY KEY,      -- 'system' | 'staff'
                value TEXT NOT NULL,        -- JSON object
                updated_at TEXT
            )
        """)
        conn.commit()
