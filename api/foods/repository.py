"""
Food persistence (raw SQL). One statement per function.
"""

from __future__ import annotations

import asyncpg

from core import db


async def insert_food(
    conn: asyncpg.Connection,
    *,
    item_id: str,
    item_name: str,
    item_unit: str,
) -> None:
    await db.execute(
        conn,
        """
        INSERT INTO foods (item_id, item_name, item_unit)
        VALUES ($1, $2, $3)
        """,
        item_id,
        item_name,
        item_unit,
    )


def build_update_food(
    item_id: str,
    *,
    item_name: str | None = None,
    item_unit: str | None = None,
) -> tuple[str, list[str]]:
    """
    Build an UPDATE touching only the supplied columns.

    Returns (sql, args). Raises ValueError when there is nothing to update.
    """
    assignments: list[str] = []
    args: list[str] = []
    if item_name is not None:
        args.append(item_name)
        assignments.append(f"item_name = ${len(args)}")
    if item_unit is not None:
        args.append(item_unit)
        assignments.append(f"item_unit = ${len(args)}")
    if not assignments:
        raise ValueError("No food fields to update.")

    args.append(item_id)
    sql = f"""
        UPDATE foods
        SET {", ".join(assignments)}
        WHERE item_id = ${len(args)}
        RETURNING item_id
        """
    return sql, args


async def update_food(
    conn: asyncpg.Connection,
    item_id: str,
    *,
    item_name: str | None = None,
    item_unit: str | None = None,
) -> bool:
    """
    Return True when a row matched `item_id`.
    """
    sql, args = build_update_food(item_id, item_name=item_name, item_unit=item_unit)
    row = await db.fetch_one(conn, sql, *args)
    return row is not None


async def upsert_food(
    conn: asyncpg.Connection,
    item_id: str,
    *,
    item_name: str,
    item_unit: str,
) -> bool:
    """
    Insert or update by `item_id`. Return True when a new row was inserted.
    """
    # xmax is 0 only for a freshly inserted tuple.
    row = await db.fetch_one(
        conn,
        """
        INSERT INTO foods (item_id, item_name, item_unit)
        VALUES ($1, $2, $3)
        ON CONFLICT (item_id) DO UPDATE
        SET item_name = EXCLUDED.item_name,
            item_unit = EXCLUDED.item_unit
        RETURNING (xmax = 0) AS inserted
        """,
        item_id,
        item_name,
        item_unit,
    )
    if row is None:
        raise RuntimeError("Failed to upsert food item.")
    return bool(row["inserted"])


async def list_food_names(conn: asyncpg.Connection) -> list[str]:
    return await db.fetch_column(conn, "SELECT item_name FROM foods", "item_name")
