"""
Customer business logic.
"""

from __future__ import annotations

import asyncpg
from fastapi import HTTPException, status

from core.errors import database_errors

from . import repository


async def list_customers(conn: asyncpg.Connection) -> dict:
    with database_errors("fetching customers"):
        names = await repository.list_customer_names(conn)
    return {"customerList": names}


async def delete_customer(conn: asyncpg.Connection, cust_code: str) -> dict:
    with database_errors("deleting customer"):
        deleted = await repository.delete_customer(conn, cust_code)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    return {"message": "Customer deleted successfully"}
