import datetime
import math
from decimal import Decimal
from typing import Any

from .types import Columns


def is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, Decimal))


def is_finite_number(value: Any) -> bool:
    if not is_number(value):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    return not (math.isnan(value) or math.isinf(value))


def debug_literal(value: Any) -> str:
    """Render ``value`` as inline SQL text for inspection.

    Strings are quoted but not escaped, so the result is never safe to
    execute.
    """
    if isinstance(value, Columns):
        return str(value)
    elif value is None:
        return "NULL"
    elif is_number(value):
        return str(value)
    elif isinstance(value, str):
        return f"'{value}'"
    elif isinstance(value, datetime.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(datetime.timezone.utc)
        return f"'{value:%Y-%m-%d %H:%M:%S.%f}'"
    else:
        return f"'{value}'"
