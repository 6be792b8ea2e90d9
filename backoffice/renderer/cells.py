"""
Classification of document values into the kinds the UI knows how to show.

A value is classified once, when it is received, into a closed set of kinds;
templates dispatch on ``Cell.kind`` and never inspect the raw value again.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional

from backoffice.constants import ISO_DATE_PATTERN, MAX_CELL_LENGTH, OBJECT_ID_PATTERN

_ISO_DATE_RE = re.compile(ISO_DATE_PATTERN)
_OBJECT_ID_RE = re.compile(OBJECT_ID_PATTERN)


class ValueKind(str, Enum):
    """Kinds of cell the table renderer distinguishes."""

    NULL = "null"
    DATE = "date"
    BOOL = "bool"
    OBJECT = "object"
    ARRAY = "array"
    IDENTIFIER = "identifier"
    STRING = "string"


@dataclass(frozen=True)
class Cell:
    kind: ValueKind
    text: str
    value: Any = None


def format_date(value: datetime) -> str:
    """Day-first short date and time, e.g. ``5/3/2024, 9:07:02``."""
    return (
        f"{value.day}/{value.month}/{value.year}, "
        f"{value.hour}:{value.minute:02d}:{value.second:02d}"
    )


def parse_iso_date(value: str) -> Optional[datetime]:
    if not _ISO_DATE_RE.match(value):
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def truncate(text: str, length: int = MAX_CELL_LENGTH) -> str:
    if len(text) > length:
        return text[:length] + "..."
    return text


def classify_value(value: Any) -> Cell:
    if value is None:
        return Cell(ValueKind.NULL, "null")

    if isinstance(value, datetime):
        return Cell(ValueKind.DATE, format_date(value), value)

    if isinstance(value, str):
        parsed = parse_iso_date(value)
        if parsed is not None:
            return Cell(ValueKind.DATE, format_date(parsed), value)

    if isinstance(value, bool):
        return Cell(ValueKind.BOOL, "true" if value else "false", value)

    if isinstance(value, Mapping):
        return Cell(ValueKind.OBJECT, f"{{{len(value)} fields}}", value)

    if isinstance(value, (list, tuple)):
        return Cell(ValueKind.ARRAY, f"[{len(value)} items]", value)

    if isinstance(value, str) and _OBJECT_ID_RE.match(value):
        return Cell(ValueKind.IDENTIFIER, value, value)

    return Cell(ValueKind.STRING, truncate(str(value)), value)
