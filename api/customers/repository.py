"""
Customer persistence (raw SQL).
"""

from __future__ import annotations

import asyncpg

from core import db


async def list_customer_names(conn: asyncpg.Connection) -> list[str]:
    return await db.fetch_column(conn, "SELECT cust_name FROM customer", "cust_name")


async def delete_customer(conn: asyncpg.Connection, cust_code: str) -> bool:
    """
    Return True when a customer with `cust_code` existed and was removed.
    """
    row = await db.fetch_one(
        conn,
        """
        DELETE FROM customer
        WHERE cust_code = $1
        RETURNING cust_code
        """,
        cust_code,
    )
    return row is not None
