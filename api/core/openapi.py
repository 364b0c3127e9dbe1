"""
Metadata and shared response models for the generated API document.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

API_TITLE = "Sample API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "A sample API for managing customers, foods, and orders"

DOCS_URL = "/api-docs"
OPENAPI_URL = "/api-docs/openapi.json"


class ValidationErrorItem(BaseModel):
    type: str = "field"
    location: str
    path: str
    msg: str
    value: Any = None


class ValidationErrorResponse(BaseModel):
    errors: list[ValidationErrorItem]


class ErrorResponse(BaseModel):
    error: str


class MessageResponse(BaseModel):
    message: str


def error_responses(*codes: int) -> dict[int | str, dict[str, Any]]:
    descriptions = {
        400: ("Invalid input", ValidationErrorResponse),
        404: ("Not found", ErrorResponse),
        500: ("Internal server error", ErrorResponse),
    }
    return {
        code: {"description": descriptions[code][0], "model": descriptions[code][1]}
        for code in codes
    }
