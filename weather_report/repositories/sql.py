from __future__ import annotations

import math
import re
from enum import Enum

TABLE = "weather_data"
COLUMNS = "city, temperature, conditions, humidity, wind_speed, date_recorded"

_FLOAT_PREFIX = re.compile(
    r"^\s*([+-]?(?:infinity|inf|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))", re.IGNORECASE
)
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


class InterpolationMode(str, Enum):
    PARAMETERIZED = "parameterized"
    RAW = "raw"
    ESCAPED = "escaped"


def sql_str(value: str, mode: InterpolationMode) -> str:
    """Quote ``value`` as a string literal.

    ``RAW`` concatenates the value untouched, so a quote inside it ends the
    literal early. ``ESCAPED`` doubles single quotes first.
    """
    if mode is InterpolationMode.ESCAPED:
        value = value.replace("'", "''")
    return f"'{value}'"


def parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return math.nan
    return float(match.group(1))


def parse_int(text: str) -> int | float:
    # NaN is a float, so an unparseable humidity is not an int.
    match = _INT_PREFIX.match(text)
    if not match:
        return math.nan
    return int(match.group(1))


def coerce_float(value: object) -> float:
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    return parse_float(str(value))


def coerce_int(value: object) -> int | float:
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else math.nan
    return parse_int(str(value))
