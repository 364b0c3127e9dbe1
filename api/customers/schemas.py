"""
Pydantic schemas for customer endpoints.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

from core.validators import with_message

CUST_CODE_LENGTH = 6

CustCode = Annotated[
    str,
    StringConstraints(min_length=CUST_CODE_LENGTH, max_length=CUST_CODE_LENGTH),
    with_message("Customer code must be 6 characters long", "cust_code_length"),
]


class CustomerListResponse(BaseModel):
    customer_list: list[str] = Field(..., alias="customerList")
