"""
Food API endpoints.
"""

from __future__ import annotations

from typing import Annotated

import asyncpg
from fastapi import APIRouter, Depends, Path, Response, status

from core import db
from core.openapi import MessageResponse, error_responses

from . import schemas, service

router = APIRouter()

ItemIdParam = Annotated[schemas.ItemId, Path(alias="itemId", description="Food item ID")]


@router.post(
    "/foods",
    summary="Create a new food item",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses={
        status.HTTP_201_CREATED: {"description": "Food item created successfully"},
        **error_responses(400, 500),
    },
)
async def create_food(
    payload: schemas.CreateFoodRequest,
    conn: asyncpg.Connection = Depends(db.connection),
) -> dict:
    return await service.create_food(
        conn,
        item_id=payload.item_id,
        item_name=payload.item_name,
        item_unit=payload.item_unit,
    )


@router.patch(
    "/foods/{itemId}",
    summary="Update a food item's name or unit",
    response_model=MessageResponse,
    responses={
        status.HTTP_200_OK: {"description": "Food item updated successfully"},
        **error_responses(400, 404, 500),
    },
)
async def update_food(
    item_id: ItemIdParam,
    payload: schemas.UpdateFoodRequest,
    conn: asyncpg.Connection = Depends(db.connection),
) -> dict:
    return await service.update_food(
        conn,
        item_id,
        item_name=payload.item_name,
        item_unit=payload.item_unit,
    )


@router.put(
    "/foods/{itemId}",
    summary="Update or create a food item",
    response_model=MessageResponse,
    responses={
        status.HTTP_200_OK: {"description": "Food item updated successfully"},
        status.HTTP_201_CREATED: {"description": "Food item created successfully", "model": MessageResponse},
        **error_responses(400, 500),
    },
)
async def upsert_food(
    response: Response,
    item_id: ItemIdParam,
    payload: schemas.UpsertFoodRequest,
    conn: asyncpg.Connection = Depends(db.connection),
) -> dict:
    created, result = await service.upsert_food(
        conn,
        item_id,
        item_name=payload.item_name,
        item_unit=payload.item_unit,
    )
    if created:
        response.status_code = status.HTTP_201_CREATED
    return result


@router.get(
    "/foods",
    summary="Retrieve a list of food item names",
    response_model=schemas.FoodListResponse,
    responses=error_responses(500),
)
async def list_foods(
    conn: asyncpg.Connection = Depends(db.connection),
) -> dict:
    return await service.list_foods(conn)
