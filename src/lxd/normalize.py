"""Normalization of native Python values before they are tagged."""

import dataclasses
import datetime as dt
from typing import Any, Union

from .errors import UnsupportedTypeError


def normalize_value(value: Any) -> Any:
    """Convert model-like objects into plain mappings.

    Pydantic v2 models (``model_dump``), pydantic v1 models (``dict`` with
    ``__fields__``) and dataclass instances become dictionaries. Anything else is
    returned unchanged.

    Args:
        value: Native value

    Returns:
        A value whose shape maps directly onto an LXD variant, or the input itself
    """
    if hasattr(type(value), "model_fields") and callable(getattr(value, "model_dump", None)):
        return value.model_dump()

    if isinstance(getattr(value, "__fields__", None), dict) and callable(getattr(value, "dict", None)):
        return value.dict()

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)

    return value


def normalize_number(value: Union[int, float]) -> float:
    """Convert a native number to the float64 payload of a NUMBER.

    Raises:
        UnsupportedTypeError: If an integer cannot be represented exactly
    """
    if isinstance(value, float):
        return float(value)

    try:
        number = float(value)
    except OverflowError as exc:
        raise UnsupportedTypeError("Integer is out of float64 range", found=value) from exc

    if int(number) != value:
        raise UnsupportedTypeError("Integer cannot be represented exactly as float64", found=value)
    return number


def normalize_timestamp(value: dt.date) -> dt.datetime:
    """Convert a date or datetime to an aware UTC datetime.

    Naive datetimes are taken to be UTC; plain dates become midnight UTC.
    """
    if not isinstance(value, dt.datetime):
        return dt.datetime(value.year, value.month, value.day, tzinfo=dt.timezone.utc)

    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=dt.timezone.utc)

    try:
        return value.astimezone(dt.timezone.utc)
    except OverflowError as exc:
        raise UnsupportedTypeError("Timestamp falls outside the UTC datetime range", found=value) from exc
