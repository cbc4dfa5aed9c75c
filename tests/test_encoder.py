import datetime as dt
import sys

import pytest

from lxd import FIELD_DELIMITER as FD
from lxd import KEY_VALUE_SEPARATOR as KV
from lxd import RECORD_END as RE
from lxd import RECORD_START as RS
from lxd import Value, encode
from lxd.errors import UnsupportedTypeError

UTC = dt.timezone.utc


def test_encode_single_pair_dict() -> None:
    assert encode({"key": "value"}) == "D" + RS + "key" + KV + "svalue" + RE


def test_encode_empty_containers() -> None:
    assert encode([]) == "L" + RS + RE
    assert encode({}) == "D" + RS + RE


def test_encode_list_has_no_leading_or_trailing_delimiter() -> None:
    assert encode([1, "a", True]) == "L" + RS + "n1.0" + FD + "sa" + FD + "btrue" + RE


def test_encode_dict_pairs_in_insertion_order() -> None:
    encoded = encode({"b": 1, "a": 2})

    assert encoded == "D" + RS + "b" + KV + "n1.0" + FD + "a" + KV + "n2.0" + RE


@pytest.mark.parametrize(
    ("number", "expected"),
    [
        (0, "n0.0"),
        (1, "n1.0"),
        (-0.0, "n-0.0"),
        (0.1, "n0.1"),
        (1e16, "n1e+16"),
        (1.5e-07, "n1.5e-07"),
        (5e-324, "n5e-324"),
        (float("inf"), "ninf"),
        (float("-inf"), "n-inf"),
        (float("nan"), "nnan"),
    ],
)
def test_encode_numbers_use_shortest_round_trip_form(number: float, expected: str) -> None:
    assert encode(number) == expected


def test_encode_booleans() -> None:
    assert encode(True) == "btrue"
    assert encode(False) == "bfalse"


def test_encode_timestamps_in_utc() -> None:
    plus_two = dt.timezone(dt.timedelta(hours=2))

    assert encode(dt.datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)) == "d2024-01-02T03:04:05Z"
    assert encode(dt.datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=UTC)) == "d2024-01-02T03:04:05.123456Z"
    assert encode(dt.datetime(2024, 1, 2, 5, 4, 5, tzinfo=plus_two)) == "d2024-01-02T03:04:05Z"


def test_encode_escapes_string_payloads() -> None:
    assert encode("a" + FD + "b\n") == "sa\\u257Db\\n"


def test_encode_escapes_dict_keys() -> None:
    assert encode({"k" + KV: 1}) == "D" + RS + "k\\uA789" + KV + "n1.0" + RE


def test_encode_nested_containers() -> None:
    encoded = encode({"rows": [{"id": 1}]})

    assert encoded == "D" + RS + "rows" + KV + "L" + RS + "D" + RS + "id" + KV + "n1.0" + RE + RE + RE


def test_encode_accepts_values_and_tuples() -> None:
    assert encode(Value("x", strict=True)) == "sx"
    assert encode(("a",)) == "L" + RS + "sa" + RE


def test_encode_rejects_unsupported_types() -> None:
    with pytest.raises(UnsupportedTypeError) as excinfo:
        encode({"ok": 1, "bad": None})

    assert isinstance(excinfo.value, TypeError)


def test_encode_rejects_nesting_past_the_stack() -> None:
    nested: list = []
    for _ in range(sys.getrecursionlimit()):
        nested = [nested]

    with pytest.raises(UnsupportedTypeError):
        encode(nested)


def test_encode_rejects_self_containing_value() -> None:
    value = Value([])
    value.append(value)

    with pytest.raises(UnsupportedTypeError):
        encode(value)


def test_encode_handles_moderate_nesting() -> None:
    nested: list = []
    for _ in range(100):
        nested = [nested]

    assert encode(nested) == "L" + RS + ("L" + RS) * 100 + RE * 101
