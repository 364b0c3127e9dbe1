"""
Student API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends

from core import db
from core.openapi import error_responses

from . import schemas, service

router = APIRouter()


@router.get(
    "/students",
    summary="Retrieve a list of student names",
    response_model=schemas.StudentListResponse,
    responses=error_responses(500),
)
async def list_students(
    conn: asyncpg.Connection = Depends(db.connection),
) -> dict:
    return await service.list_students(conn)
