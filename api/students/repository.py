"""
Student persistence (raw SQL).
"""

from __future__ import annotations

import asyncpg

from core import db


async def list_student_names(conn: asyncpg.Connection) -> list[str]:
    return await db.fetch_column(conn, "SELECT name FROM student", "name")
