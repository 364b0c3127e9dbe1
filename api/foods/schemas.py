"""
Pydantic schemas for food endpoints.

The request models are the route body parameters: FastAPI validates and
sanitizes them (trim, length, HTML-escape) before the handler runs.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, StringConstraints

from core.validators import escape_html, with_message

ITEM_ID_MAX = 6
ITEM_NAME_MAX = 25
ITEM_UNIT_MAX = 5

ITEM_ID_MESSAGE = "Item ID must be between 1 and 6 characters long"

ItemId = Annotated[
    str,
    StringConstraints(min_length=1, max_length=ITEM_ID_MAX),
    with_message(ITEM_ID_MESSAGE, "item_id_length"),
]
ItemName = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=ITEM_NAME_MAX),
    AfterValidator(escape_html),
]
ItemUnit = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=ITEM_UNIT_MAX),
    AfterValidator(escape_html),
]


class CreateFoodRequest(BaseModel):
    item_id: ItemId = Field(..., alias="itemId")
    item_name: ItemName = Field(..., alias="itemName")
    item_unit: ItemUnit = Field(..., alias="itemUnit")


class UpdateFoodRequest(BaseModel):
    item_name: ItemName | None = Field(default=None, alias="itemName")
    item_unit: ItemUnit | None = Field(default=None, alias="itemUnit")


class UpsertFoodRequest(BaseModel):
    item_name: ItemName = Field(..., alias="itemName")
    item_unit: ItemUnit = Field(..., alias="itemUnit")


class FoodListResponse(BaseModel):
    food_list: list[str] = Field(..., alias="foodList")
