"""
Quiz Results Store

PostgreSQL persistence for quiz submissions (psycopg2, RealDictCursor).
The table is created on first use.

Any connection or driver failure raises StorageUnavailableError so the
callers can degrade instead of failing the user-facing flow.
"""

import logging
import os
from typing import Any, Dict, List, Optional

import psycopg2
from psycopg2.extras import RealDictCursor, Json

from .models import CONTACT_FIELDS

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("recommendation",) + CONTACT_FIELDS
JSON_FIELDS = ("answers", "recommendation")

CREATE_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS quiz_results (
        id SERIAL PRIMARY KEY,
        answers JSONB NOT NULL,
        recommendation JSONB,
        name VARCHAR(255),
        email VARCHAR(255),
        phone VARCHAR(50),
        state VARCHAR(100),
        created_at TIMESTAMPTZ DEFAULT NOW(),
        updated_at TIMESTAMPTZ DEFAULT NOW()
    );

    CREATE INDEX IF NOT EXISTS idx_quiz_results_created_at
        ON quiz_results(created_at DESC);
"""

RESULT_COLUMNS = "id, answers, recommendation, name, email, phone, state, created_at, updated_at"


class StorageUnavailableError(Exception):
    """Raised when the quiz results database cannot be reached or written."""


def get_db():
    """
    Get database connection.

    Uses DATABASE_URL, or the libpq PG* variables when only PGHOST is set.
    """
    db_url = os.getenv("DATABASE_URL")
    if not db_url and not os.getenv("PGHOST"):
        raise StorageUnavailableError("Database not configured")
    try:
        return psycopg2.connect(db_url or "", cursor_factory=RealDictCursor)
    except psycopg2.Error as e:
        logger.error(f"[Quiz Results] DB connection failed: {e}")
        raise StorageUnavailableError(f"DB connection failed: {e}") from e


def ensure_table(conn) -> None:
    with conn.cursor() as cur:
        cur.execute(CREATE_TABLE_SQL)
    conn.commit()


def _run(query: str, params: tuple = (), fetch: str = "one"):
    """Execute one statement in its own connection and return the rows."""
    conn = get_db()
    try:
        ensure_table(conn)
        with conn.cursor() as cur:
            cur.execute(query, params)
            rows = cur.fetchall() if fetch == "all" else cur.fetchone()
        conn.commit()
        return rows
    except psycopg2.Error as e:
        conn.rollback()
        logger.error(f"[Quiz Results] Query failed: {e}")
        raise StorageUnavailableError(f"Query failed: {e}") from e
    finally:
        conn.close()


def _adapt(field: str, value: Any) -> Any:
    if field in JSON_FIELDS and value is not None:
        return Json(value)
    return value


def create_result(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Insert a submission and return the stored row."""
    row = _run(
        f"""
        INSERT INTO quiz_results (answers, recommendation, name, email, phone, state)
        VALUES (%s, %s, %s, %s, %s, %s)
        RETURNING {RESULT_COLUMNS}
        """,
        (
            Json(payload.get("answers") or {}),
            _adapt("recommendation", payload.get("recommendation")),
        ) + tuple(payload.get(field) for field in CONTACT_FIELDS),
    )
    logger.info(f"[Quiz Results] Stored submission {row['id']}")
    return dict(row)


def list_results(limit: int = 20, offset: int = 0) -> List[Dict[str, Any]]:
    """Newest submissions first."""
    rows = _run(
        f"""
        SELECT {RESULT_COLUMNS}
        FROM quiz_results
        ORDER BY created_at DESC, id DESC
        LIMIT %s OFFSET %s
        """,
        (limit, offset),
        fetch="all",
    )
    return [dict(r) for r in rows]


def get_result(result_id: int) -> Optional[Dict[str, Any]]:
    row = _run(
        f"SELECT {RESULT_COLUMNS} FROM quiz_results WHERE id = %s",
        (result_id,),
    )
    return dict(row) if row else None


def update_result(result_id: int, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Update contact fields and/or the recommendation of a submission.

    Unknown field names are ignored. Returns None if the row does not exist.
    """
    updates = {k: v for k, v in fields.items() if k in UPDATABLE_FIELDS}
    if not updates:
        return get_result(result_id)

    assignments = ", ".join(f"{field} = %s" for field in updates)
    params = tuple(_adapt(field, value) for field, value in updates.items())

    row = _run(
        f"""
        UPDATE quiz_results
        SET {assignments}, updated_at = NOW()
        WHERE id = %s
        RETURNING {RESULT_COLUMNS}
        """,
        params + (result_id,),
    )
    return dict(row) if row else None
