"""Formatting and parsing of scalar payloads."""

import datetime as dt
import math
from typing import Optional

from .constants import (
    FALSE_LITERAL,
    LEGACY_FLOAT_LETTER,
    LEGACY_FLOAT_REGEX,
    LEGACY_INTEGER_LETTER,
    LEGACY_INTEGER_REGEX,
    NON_FINITE_LITERALS,
    NUMBER_LETTER,
    NUMBER_REGEX,
    TIMESTAMP_REGEX,
    TRUE_LITERAL,
    UTC_DESIGNATOR,
)
from .errors import BooleanFormatError, DateFormatError, NumberFormatError

_NUMBER_GRAMMARS = {
    NUMBER_LETTER: NUMBER_REGEX,
    LEGACY_INTEGER_LETTER: LEGACY_INTEGER_REGEX,
    LEGACY_FLOAT_LETTER: LEGACY_FLOAT_REGEX,
}


def format_number(number: float) -> str:
    """Format a number as its shortest round-trip decimal literal.

    Args:
        number: Float payload

    Returns:
        Literal such as ``1.0``, ``0.1``, ``1e+16``, ``inf`` or ``nan``
    """
    if math.isnan(number):
        return "nan"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    return repr(float(number))


def format_boolean(flag: bool) -> str:
    return TRUE_LITERAL if flag else FALSE_LITERAL


def format_timestamp(moment: dt.datetime) -> str:
    """Format an aware datetime as ISO-8601 in UTC with a ``Z`` designator.

    Microseconds are written only when non-zero.
    """
    utc_moment = moment.astimezone(dt.timezone.utc).replace(tzinfo=None)
    return utc_moment.isoformat() + UTC_DESIGNATOR


def parse_number(text: str, letter: str = NUMBER_LETTER, offset: Optional[int] = None) -> float:
    """Parse a number literal.

    Args:
        text: Unescaped payload
        letter: Type letter the payload was read under (``n``, or legacy ``i``/``f``)
        offset: Position of the payload, used in errors

    Returns:
        Float value

    Raises:
        NumberFormatError: If the literal does not match the grammar for ``letter``,
            overflows float64, or is a legacy integer float64 cannot hold exactly
    """
    grammar = _NUMBER_GRAMMARS[letter]
    if grammar.fullmatch(text) is None:
        raise NumberFormatError("Malformed number literal", offset=offset, found=text)

    if text in NON_FINITE_LITERALS:
        return NON_FINITE_LITERALS[text]

    try:
        if letter == LEGACY_INTEGER_LETTER:
            integer = int(text)
            number = float(integer)
        else:
            number = float(text)
    except (OverflowError, ValueError) as exc:
        raise NumberFormatError("Number literal is out of float64 range", offset=offset, found=text) from exc

    if letter == LEGACY_INTEGER_LETTER and int(number) != integer:
        raise NumberFormatError("Integer literal is not exact in float64", offset=offset, found=text)

    if math.isinf(number):
        raise NumberFormatError("Number literal is out of float64 range", offset=offset, found=text)
    return number


def parse_boolean(text: str, offset: Optional[int] = None) -> bool:
    if text == TRUE_LITERAL:
        return True
    if text == FALSE_LITERAL:
        return False
    raise BooleanFormatError(
        "Malformed boolean literal", offset=offset, expected=f"{TRUE_LITERAL} or {FALSE_LITERAL}", found=text
    )


def parse_timestamp(text: str, offset: Optional[int] = None) -> dt.datetime:
    """Parse an ISO-8601 timestamp that carries ``Z`` or a ``+HH:MM`` offset.

    Fractional seconds beyond microsecond precision are truncated. The result is
    converted to UTC.

    Raises:
        DateFormatError: If the text is not a valid timestamp
    """
    match = TIMESTAMP_REGEX.fullmatch(text)
    if match is None:
        raise DateFormatError(
            "Malformed ISO-8601 timestamp", offset=offset, expected="YYYY-MM-DDTHH:MM:SS[.ffffff]Z", found=text
        )

    year, month, day, hour, minute, second, fraction, zone = match.groups()
    microsecond = int((fraction or "")[:6].ljust(6, "0"))

    try:
        if zone == UTC_DESIGNATOR:
            tzinfo = dt.timezone.utc
        else:
            sign = -1 if zone[0] == "-" else 1
            hours, minutes = int(zone[1:3]), int(zone[4:6])
            if minutes > 59:
                raise ValueError("offset minutes must be in 0..59")
            delta = dt.timedelta(hours=hours, minutes=minutes)
            tzinfo = dt.timezone(sign * delta)
        moment = dt.datetime(
            int(year), int(month), int(day), int(hour), int(minute), int(second), microsecond, tzinfo=tzinfo
        )
        return moment.astimezone(dt.timezone.utc)
    except (ValueError, OverflowError) as exc:
        raise DateFormatError(f"Invalid timestamp: {exc}", offset=offset, found=text) from exc
