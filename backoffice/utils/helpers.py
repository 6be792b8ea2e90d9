"""
Helpers for turning BSON documents into JSON-friendly values.
"""

import base64
import math
from datetime import date, datetime
from typing import Any
from uuid import UUID

from bson import Binary, Decimal128, ObjectId
from bson.errors import InvalidId

from backoffice.core.exceptions import BadRequestError


def to_jsonable(value: Any) -> Any:
    """Recursively convert a BSON value into something ``json`` can encode."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(key): to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    if isinstance(value, Decimal128):
        return str(value)
    if isinstance(value, (Binary, bytes)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return None
    return value


def parse_object_id(value: str) -> ObjectId:
    """Parse a 24-hex identifier, rejecting malformed input as a bad request."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise BadRequestError(str(e)) from e


def parse_int(value: Any, default: int) -> int:
    """Lenient integer parsing: anything unparseable falls back to ``default``."""
    if value is None:
        return default
    try:
        return int(str(value).strip())
    except ValueError:
        return default
