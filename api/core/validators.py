"""
Reusable pydantic validators for request fields.

Used as `Annotated` metadata in the feature schemas, e.g.

    ItemName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=25), AfterValidator(escape_html)]
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError, ValidatorFunctionWrapHandler, WrapValidator
from pydantic_core import PydanticCustomError

# Same entity set as validator.js `escape()`. Worst case is 6 characters per input character.
_ESCAPE_TABLE = str.maketrans(
    {
        "&": "&amp;",
        '"': "&quot;",
        "'": "&#x27;",
        "<": "&lt;",
        ">": "&gt;",
        "/": "&#x2F;",
        "\\": "&#x5C;",
        "`": "&#96;",
    }
)

ESCAPE_MAX_EXPANSION = 6


def escape_html(value: str) -> str:
    return value.translate(_ESCAPE_TABLE)


def with_message(message: str, error_type: str = "invalid_value") -> WrapValidator:
    """
    Replace every error raised by the preceding constraints with one fixed message.

    Must come after the constraints it wraps in the `Annotated` metadata.
    """

    def _validate(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(value)
        except ValidationError as exc:
            raise PydanticCustomError(error_type, message) from exc

    return WrapValidator(_validate)
