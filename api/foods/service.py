"""
Food business logic: status/message mapping and the shared error policy.
"""

from __future__ import annotations

import asyncpg
from fastapi import HTTPException, status

from core.errors import database_errors

from . import repository

CREATED_MESSAGE = "Food item created successfully"
UPDATED_MESSAGE = "Food item updated successfully"
NOT_FOUND_MESSAGE = "Food item not found"
NOTHING_TO_UPDATE_MESSAGE = "At least one field (itemName or itemUnit) must be provided"


async def create_food(
    conn: asyncpg.Connection,
    *,
    item_id: str,
    item_name: str,
    item_unit: str,
) -> dict:
    with database_errors("creating food item"):
        await repository.insert_food(
            conn,
            item_id=item_id,
            item_name=item_name,
            item_unit=item_unit,
        )
    return {"message": CREATED_MESSAGE}


async def update_food(
    conn: asyncpg.Connection,
    item_id: str,
    *,
    item_name: str | None = None,
    item_unit: str | None = None,
) -> dict:
    if not item_name and not item_unit:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=NOTHING_TO_UPDATE_MESSAGE)

    with database_errors("updating food item"):
        found = await repository.update_food(
            conn,
            item_id,
            item_name=item_name or None,
            item_unit=item_unit or None,
        )
    if not found:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    return {"message": UPDATED_MESSAGE}


async def upsert_food(
    conn: asyncpg.Connection,
    item_id: str,
    *,
    item_name: str,
    item_unit: str,
) -> tuple[bool, dict]:
    """
    Return (created, body). `created` drives 201 vs 200.
    """
    with database_errors("updating/creating food item"):
        created = await repository.upsert_food(
            conn,
            item_id,
            item_name=item_name,
            item_unit=item_unit,
        )
    return created, {"message": CREATED_MESSAGE if created else UPDATED_MESSAGE}


async def list_foods(conn: asyncpg.Connection) -> dict:
    with database_errors("fetching foods"):
        names = await repository.list_food_names(conn)
    return {"foodList": names}
