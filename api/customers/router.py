"""
Customer API endpoints.
"""

from __future__ import annotations

from typing import Annotated

import asyncpg
from fastapi import APIRouter, Depends, Path, status

from core import db
from core.openapi import MessageResponse, error_responses

from . import schemas, service

router = APIRouter()


@router.get(
    "/customers",
    summary="Retrieve a list of customer names",
    response_model=schemas.CustomerListResponse,
    responses=error_responses(500),
)
async def list_customers(
    conn: asyncpg.Connection = Depends(db.connection),
) -> dict:
    return await service.list_customers(conn)


@router.delete(
    "/customers/{custCode}",
    summary="Delete a customer",
    response_model=MessageResponse,
    responses={
        status.HTTP_200_OK: {"description": "Customer deleted successfully"},
        **error_responses(400, 404, 500),
    },
)
async def delete_customer(
    cust_code: Annotated[schemas.CustCode, Path(alias="custCode", description="Customer code")],
    conn: asyncpg.Connection = Depends(db.connection),
) -> dict:
    return await service.delete_customer(conn, cust_code)
