from datetime import date, datetime

import pytest

from file_schema.core.parsed_type import get_parsed_type


@pytest.mark.parametrize("value, expected", [
    (None, "null"),
    (True, "boolean"),
    (False, "boolean"),
    (0, "number"),
    (123, "number"),
    (1.5, "number"),
    (float("nan"), "nan"),
    ("123", "string"),
    (b"123", "bytes"),
    (bytearray(b"1"), "bytes"),
    (memoryview(b"1"), "bytes"),
    ([1], "array"),
    ((1,), "array"),
    ({1}, "set"),
    (frozenset(), "set"),
    (date(2024, 1, 1), "date"),
    (datetime(2024, 1, 1, 12, 0), "date"),
    (len, "function"),
    ({"a": 1}, "object"),
    (object(), "object"),
])
def test_get_parsed_type(value, expected):
    assert get_parsed_type(value) == expected
