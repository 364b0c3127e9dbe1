from __future__ import annotations

import asyncpg

from core.errors import database_errors

from . import repository


async def list_students(conn: asyncpg.Connection) -> dict:
    with database_errors("fetching students"):
        names = await repository.list_student_names(conn)
    return {"studentList": names}
