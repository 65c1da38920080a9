"""Unit tests for pydantic schema adapters."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import BaseModel

from core.errors import SheetValidationError
from transforms.schema_parsing import build_schema_parser, passthrough_parser


class Review(BaseModel):
    reviewer: str
    rating: str
    data: date
    reviewID: int


def test_schema_parser_coerces_field_types() -> None:
    """Strings should be coerced to the model's field types."""
    parse_data = build_schema_parser(Review)

    parsed = parse_data(
        id="row-1",
        data={"reviewer": "Ann", "rating": "5", "data": "2024-05-01", "reviewID": "7"},
    )

    assert parsed == {
        "reviewer": "Ann",
        "rating": "5",
        "data": date(2024, 5, 1),
        "reviewID": 7,
    }


def test_schema_parser_raises_with_row_id() -> None:
    """Invalid rows should raise a validation error naming the row."""
    parse_data = build_schema_parser(Review)

    with pytest.raises(SheetValidationError) as error_info:
        parse_data(id="row-4", data={"reviewer": "Ann", "rating": "5", "data": "", "reviewID": "x"})

    assert error_info.value.entry_id == "row-4"
    assert "reviewID" in str(error_info.value)


def test_passthrough_parser_copies_record() -> None:
    """Passthrough should return an equal but separate mapping."""
    record = {"A": "a"}

    parsed = passthrough_parser(id="row-1", data=record)

    assert parsed == record and parsed is not record
