"""Runtime type names reported in invalid_type issues."""

import math
from datetime import date
from typing import Any

BUFFER_TYPES = (bytes, bytearray, memoryview)


def get_parsed_type(value: Any) -> str:
    """
    Name the runtime type of a candidate value.

    Returns one of: null, boolean, number, nan, string, bytes, array, set, date,
    function, object.
    """
    if value is None:
        return "null"
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, float) and math.isnan(value):
        return "nan"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, BUFFER_TYPES):
        return "bytes"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, (set, frozenset)):
        return "set"
    if isinstance(value, date):
        return "date"
    if callable(value):
        return "function"
    return "object"
