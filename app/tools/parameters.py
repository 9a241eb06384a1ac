"""
app/tools/parameters.py

Tool argument parsing.

Arguments arrive as a loosely-typed JSON object from an automated caller.
Every key is accepted in camelCase (``artistId``) or snake_case
(``artist_id``); camelCase wins when both are present.  A value that cannot
be converted to the expected type is ignored, i.e. treated as if the
caller had not sent it.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Collection, Mapping
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic.alias_generators import to_camel

from app.domain.artwork_sales import SaleFilter

logger = logging.getLogger(__name__)

_MISSING = object()

# snake_case name -> JSON-schema property, in the order shown to callers.
FILTER_PROPERTIES: dict[str, dict[str, Any]] = {
    "artist_id": {"type": "string", "format": "uuid", "description": "Filter by artist ID (exact match)"},
    "name": {"type": "string", "description": "Filter by artwork name (partial match)"},
    "min_height": {"type": "number", "description": "Minimum height in cm"},
    "max_height": {"type": "number", "description": "Maximum height in cm"},
    "min_width": {"type": "number", "description": "Minimum width in cm"},
    "max_width": {"type": "number", "description": "Maximum width in cm"},
    "year_created_from": {"type": "integer", "description": "Start year for creation year filter"},
    "year_created_to": {"type": "integer", "description": "End year for creation year filter"},
    "sale_date_from": {
        "type": "string",
        "format": "date-time",
        "description": "Start date for sale date filter (ISO 8601 format)",
    },
    "sale_date_to": {
        "type": "string",
        "format": "date-time",
        "description": "End date for sale date filter (ISO 8601 format)",
    },
    "technique": {"type": "string", "description": "Filter by technique (partial match)"},
    "category": {"type": "string", "description": "Filter by category (partial match)"},
    "currency": {"type": "string", "description": "Filter by currency (exact match)"},
    "min_low_estimate": {"type": "number", "description": "Minimum low estimate"},
    "max_low_estimate": {"type": "number", "description": "Maximum low estimate"},
    "min_high_estimate": {"type": "number", "description": "Minimum high estimate"},
    "max_high_estimate": {"type": "number", "description": "Maximum high estimate"},
    "min_hammer_price": {"type": "number", "description": "Minimum hammer price"},
    "max_hammer_price": {"type": "number", "description": "Maximum hammer price"},
    "sold": {"type": "boolean", "description": "Filter by sold status"},
    "page": {"type": "integer", "description": "Page number (default: 1)"},
}

ALL_FILTER_FIELDS: tuple[str, ...] = tuple(FILTER_PROPERTIES)


def _lookup(arguments: Mapping[str, Any], snake_case: str) -> Any:
    camel_case = to_camel(snake_case)
    if camel_case in arguments:
        return arguments[camel_case]
    return arguments.get(snake_case, _MISSING)


def get_str(arguments: Mapping[str, Any], name: str) -> str | None:
    value = _lookup(arguments, name)
    if value is _MISSING or value is None:
        return None
    text = str(value).strip()
    return text or None


def get_uuid(arguments: Mapping[str, Any], name: str) -> uuid.UUID | None:
    text = get_str(arguments, name)
    if text is None:
        return None
    try:
        return uuid.UUID(text)
    except ValueError:
        logger.debug("Ignoring unparseable %s=%r", name, text)
        return None


def get_decimal(arguments: Mapping[str, Any], name: str) -> Decimal | None:
    value = _lookup(arguments, name)
    if value is _MISSING or value is None or isinstance(value, bool):
        return None
    try:
        parsed = Decimal(str(value).strip())
    except InvalidOperation:
        logger.debug("Ignoring unparseable %s=%r", name, value)
        return None
    return parsed if parsed.is_finite() else None


def get_int(arguments: Mapping[str, Any], name: str) -> int | None:
    value = _lookup(arguments, name)
    if value is _MISSING or value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value).strip())
    except ValueError:
        logger.debug("Ignoring unparseable %s=%r", name, value)
        return None


def get_bool(arguments: Mapping[str, Any], name: str) -> bool | None:
    value = _lookup(arguments, name)
    if value is _MISSING or value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    text = str(value).strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    logger.debug("Ignoring unparseable %s=%r", name, value)
    return None


def get_datetime(arguments: Mapping[str, Any], name: str) -> datetime | None:
    """
    Parse an ISO 8601 date or datetime.  Values without an offset are
    taken as UTC.
    """
    text = get_str(arguments, name)
    if text is None:
        return None
    normalized = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        parsed = datetime.fromisoformat(normalized)
    except ValueError:
        logger.debug("Ignoring unparseable %s=%r", name, text)
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


_PARSERS = {
    "artist_id": get_uuid,
    "name": get_str,
    "min_height": get_decimal,
    "max_height": get_decimal,
    "min_width": get_decimal,
    "max_width": get_decimal,
    "year_created_from": get_int,
    "year_created_to": get_int,
    "sale_date_from": get_datetime,
    "sale_date_to": get_datetime,
    "technique": get_str,
    "category": get_str,
    "currency": get_str,
    "min_low_estimate": get_decimal,
    "max_low_estimate": get_decimal,
    "min_high_estimate": get_decimal,
    "max_high_estimate": get_decimal,
    "min_hammer_price": get_decimal,
    "max_hammer_price": get_decimal,
    "sold": get_bool,
    "page": get_int,
}


def parse_sale_filter(
    arguments: Mapping[str, Any],
    fields: Collection[str] = ALL_FILTER_FIELDS,
) -> SaleFilter:
    """
    Build a :class:`SaleFilter` from tool *arguments*.

    Only *fields* are read; any other key, known or not, is ignored.
    """
    values: dict[str, Any] = {}
    for name in fields:
        parsed = _PARSERS[name](arguments, name)
        if parsed is not None:
            values[name] = parsed
    return SaleFilter(**values)


def filter_input_schema(
    fields: Collection[str] = ALL_FILTER_FIELDS,
    required: Collection[str] = (),
) -> dict[str, Any]:
    """JSON schema for a tool accepting *fields*, in snake_case."""
    schema: dict[str, Any] = {
        "type": "object",
        "properties": {name: dict(FILTER_PROPERTIES[name]) for name in ALL_FILTER_FIELDS if name in fields},
    }
    if required:
        schema["required"] = list(required)
    return schema
