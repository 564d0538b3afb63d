"""Shared pydantic field types."""

from datetime import date
from typing import Annotated

from pydantic import BeforeValidator, PlainSerializer

from core.dates import format_date, parse_date
from core.exceptions import InvalidDateError


def _parse_wire_date(value):
    try:
        return parse_date(value)
    except InvalidDateError as exc:
        raise ValueError(exc.message) from exc


# Calendar date exchanged as DD-MM-YYYY in both directions.
WireDate = Annotated[date, BeforeValidator(_parse_wire_date), PlainSerializer(format_date, return_type=str)]
