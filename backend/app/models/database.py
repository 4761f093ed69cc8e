"""
SQLite Persistence Layer — SOFI Dashboard API
Stores users, funds and portfolios.
Thread-safe, uses WAL mode for concurrent reads.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple

from app.core.config import settings

logger = logging.getLogger(__name__)

_db_path: str = settings.sqlite_path
_local = threading.local()


def configure(path: str):
    """Point the persistence layer at another SQLite file."""
    global _db_path
    close()
    _db_path = path


def close():
    conn = getattr(_local, "conn", None)
    if conn is not None:
        conn.close()
    _local.conn = None
    _local.path = None


def _get_conn() -> sqlite3.Connection:
    """Return a thread-local connection (SQLite is not thread-safe across threads)."""
    if getattr(_local, "conn", None) is None or getattr(_local, "path", None) != _db_path:
        if getattr(_local, "conn", None) is not None:
            _local.conn.close()
        conn = sqlite3.connect(_db_path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode=WAL")
        conn.execute("PRAGMA foreign_keys=ON")
        _local.conn = conn
        _local.path = _db_path
    return _local.conn


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def init_db():
    """Create tables if they don't exist."""
    conn = _get_conn()
    conn.executescript(
        """
        CREATE TABLE IF NOT EXISTS users (
            id            INTEGER PRIMARY KEY AUTOINCREMENT,
            email         TEXT NOT NULL UNIQUE COLLATE NOCASE,
            password_hash TEXT NOT NULL,
            role          TEXT NOT NULL,       -- 'Admin' | 'Analyst' | 'Manager' | 'Viewer'
            created_at    TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS funds (
            id           INTEGER PRIMARY KEY AUTOINCREMENT,
            name         TEXT NOT NULL,
            value        REAL NOT NULL,
            performance  REAL NOT NULL,        -- percentage
            risk_level   TEXT NOT NULL,
            created_at   TEXT NOT NULL,
            updated_at   TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS portfolios (
            id          INTEGER PRIMARY KEY AUTOINCREMENT,
            name        TEXT NOT NULL,
            created_at  TEXT NOT NULL
        );

        -- fund_id is not a foreign key: deleting a fund leaves the holding behind
        CREATE TABLE IF NOT EXISTS portfolio_holdings (
            portfolio_id INTEGER NOT NULL REFERENCES portfolios(id) ON DELETE CASCADE,
            fund_id      INTEGER NOT NULL,
            weight       REAL NOT NULL,
            PRIMARY KEY (portfolio_id, fund_id)
        );

        CREATE INDEX IF NOT EXISTS idx_holdings_portfolio ON portfolio_holdings(portfolio_id);
    """
    )
    conn.commit()
    logger.info("Database initialised at %s", _db_path)


# ── Users ─────────────────────────────────────────────────────────────────────


def create_user(email: str, password_hash: str, role: str) -> Dict[str, Any]:
    conn = _get_conn()
    cur = conn.execute(
        "INSERT INTO users (email, password_hash, role, created_at) VALUES (?, ?, ?, ?)",
        (email, password_hash, role, _now()),
    )
    conn.commit()
    return get_user(cur.lastrowid)


def get_user(user_id: int) -> Optional[Dict[str, Any]]:
    conn = _get_conn()
    row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
    return dict(row) if row else None


def get_user_by_email(email: str) -> Optional[Dict[str, Any]]:
    conn = _get_conn()
    row = conn.execute("SELECT * FROM users WHERE email = ?", (email.strip(),)).fetchone()
    return dict(row) if row else None


def count_users() -> int:
    return _get_conn().execute("SELECT COUNT(*) FROM users").fetchone()[0]


# ── Funds ─────────────────────────────────────────────────────────────────────


def list_funds() -> List[Dict[str, Any]]:
    conn = _get_conn()
    rows = conn.execute(
        "SELECT id, name, value, performance, risk_level FROM funds ORDER BY id"
    ).fetchall()
    return [dict(r) for r in rows]


def get_fund(fund_id: int) -> Optional[Dict[str, Any]]:
    conn = _get_conn()
    row = conn.execute(
        "SELECT id, name, value, performance, risk_level FROM funds WHERE id = ?", (fund_id,)
    ).fetchone()
    return dict(row) if row else None


def get_funds_by_ids(fund_ids: Sequence[int]) -> Dict[int, Dict[str, Any]]:
    if not fund_ids:
        return {}
    conn = _get_conn()
    placeholders = ",".join("?" for _ in fund_ids)
    rows = conn.execute(
        f"SELECT id, name, value, performance, risk_level FROM funds WHERE id IN ({placeholders})",
        tuple(fund_ids),
    ).fetchall()
    return {r["id"]: dict(r) for r in rows}


def create_fund(name: str, value: float, performance: float, risk_level: str) -> Dict[str, Any]:
    conn = _get_conn()
    now = _now()
    cur = conn.execute(
        """
        INSERT INTO funds (name, value, performance, risk_level, created_at, updated_at)
        VALUES (?, ?, ?, ?, ?, ?)
    """,
        (name, value, performance, risk_level, now, now),
    )
    conn.commit()
    return get_fund(cur.lastrowid)


def update_fund(fund_id: int, name: str, value: float, performance: float, risk_level: str) -> Optional[Dict[str, Any]]:
    """Overwrite a fund's fields. Returns None when the id is unknown."""
    conn = _get_conn()
    cur = conn.execute(
        """
        UPDATE funds SET name = ?, value = ?, performance = ?, risk_level = ?, updated_at = ?
        WHERE id = ?
    """,
        (name, value, performance, risk_level, _now(), fund_id),
    )
    conn.commit()
    if cur.rowcount == 0:
        return None
    return get_fund(fund_id)


def delete_fund(fund_id: int) -> bool:
    conn = _get_conn()
    cur = conn.execute("DELETE FROM funds WHERE id = ?", (fund_id,))
    conn.commit()
    return cur.rowcount > 0


def count_funds() -> int:
    return _get_conn().execute("SELECT COUNT(*) FROM funds").fetchone()[0]


# ── Portfolios ────────────────────────────────────────────────────────────────


def create_portfolio(name: str, holdings: Sequence[Tuple[int, float]]) -> Dict[str, Any]:
    conn = _get_conn()
    with conn:
        cur = conn.execute("INSERT INTO portfolios (name, created_at) VALUES (?, ?)", (name, _now()))
        pid = cur.lastrowid
        conn.executemany(
            "INSERT INTO portfolio_holdings (portfolio_id, fund_id, weight) VALUES (?, ?, ?)",
            [(pid, fund_id, weight) for fund_id, weight in holdings],
        )
    return get_portfolio(pid)


def get_portfolio(portfolio_id: int) -> Optional[Dict[str, Any]]:
    conn = _get_conn()
    row = conn.execute("SELECT id, name, created_at FROM portfolios WHERE id = ?", (portfolio_id,)).fetchone()
    if not row:
        return None
    holdings = conn.execute(
        "SELECT fund_id, weight FROM portfolio_holdings WHERE portfolio_id = ? ORDER BY fund_id",
        (portfolio_id,),
    ).fetchall()
    return {**dict(row), "holdings": [dict(h) for h in holdings]}


def list_portfolios() -> List[Dict[str, Any]]:
    conn = _get_conn()
    ids = [r["id"] for r in conn.execute("SELECT id FROM portfolios ORDER BY id").fetchall()]
    return [get_portfolio(pid) for pid in ids]


def get_stats() -> Dict:
    """Return row counts across all stored entities."""
    conn = _get_conn()
    by_role = conn.execute("SELECT role, COUNT(*) as n FROM users GROUP BY role").fetchall()
    return {
        "users": count_users(),
        "funds": count_funds(),
        "portfolios": conn.execute("SELECT COUNT(*) FROM portfolios").fetchone()[0],
        "users_by_role": {r["role"]: r["n"] for r in by_role},
    }
