"""Schema adapters for row validation.

This module turns pydantic models into ``parse_data`` hooks for the
entry builder. Rows arrive as string-keyed string maps and leave as the
model's coerced field values.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError

from core.errors import SheetValidationError
from core.types import NormalizedRecord, ParseDataFn


def build_schema_parser(model: type[BaseModel]) -> ParseDataFn:
    """Build a parse hook that validates rows against a pydantic model.

    Args:
        model: Model class describing one collection entry.

    Returns:
        Callable accepting ``id`` and ``data`` keywords and returning
        the validated field dictionary.
    """

    def parse_data(*, id: str, data: NormalizedRecord) -> dict[str, Any]:
        try:
            validated = model.model_validate(data)
        except ValidationError as error:
            raise SheetValidationError(
                f"Row {id} failed {model.__name__} validation: "
                f"{error.error_count()} error(s). {_summarize_errors(error)}",
                entry_id=id,
            ) from error
        return validated.model_dump()

    return parse_data


def passthrough_parser(*, id: str, data: NormalizedRecord) -> dict[str, Any]:
    """Return the record unchanged, for collections without a schema."""
    _ = id
    return dict(data)


def _summarize_errors(error: ValidationError) -> str:
    """Render pydantic errors as ``field: message`` pairs."""
    parts = []
    for detail in error.errors():
        location = ".".join(str(item) for item in detail["loc"]) or "<root>"
        parts.append(f"{location}: {detail['msg']}")
    return "; ".join(parts)
