"""Escaping of reserved and control characters in string payloads and keys."""

import re
from typing import List

from .constants import BACKSLASH, RESERVED_CHARS, SHORT_ESCAPES, SHORT_UNESCAPES
from .errors import InvalidEscapeSequenceError

_ESCAPE_TRANSLATION = str.maketrans(
    {
        **SHORT_ESCAPES,
        **{char: f"\\u{ord(char):04X}" for char in RESERVED_CHARS},
    }
)

_RE_HEX = re.compile(r"[0-9A-Fa-f]+")

_MAX_CODE_POINT = 0x10FFFF


def escape(value: str) -> str:
    """Escape a raw string for use as a payload or dictionary key.

    Reserved code points become ``\\uXXXX``; backslash, CR, LF, tab and both
    quote characters become their short forms. Everything else passes through.

    Args:
        value: Raw string

    Returns:
        Escaped string containing no reserved code points
    """
    return value.translate(_ESCAPE_TRANSLATION)


def unescape(value: str, offset: int = 0) -> str:
    """Restore a string produced by :func:`escape`.

    Also accepts ``\\u{H..HHHHHH}`` for any Unicode scalar value and the legacy
    ``\\xXX`` form written by older encoders.

    Args:
        value: Escaped string
        offset: Position of ``value`` within the enclosing document, used in errors

    Returns:
        Raw string

    Raises:
        InvalidEscapeSequenceError: If a backslash starts no recognized escape
    """
    if BACKSLASH not in value:
        return value

    result: List[str] = []
    length = len(value)
    i = 0
    while i < length:
        char = value[i]
        if char != BACKSLASH:
            result.append(char)
            i += 1
            continue

        if i + 1 >= length:
            raise InvalidEscapeSequenceError("Escape introducer at end of payload", offset=offset + i)

        marker = value[i + 1]
        if marker in SHORT_UNESCAPES:
            result.append(SHORT_UNESCAPES[marker])
            i += 2
        elif marker == "u" and value[i + 2 : i + 3] == "{":
            close = value.find("}", i + 3)
            digits = value[i + 3 : close] if close != -1 else value[i + 3 :]
            if close == -1 or len(digits) > 6 or not _is_hex(digits):
                raise InvalidEscapeSequenceError(
                    "Malformed \\u{...} escape", offset=offset + i, expected="1-6 hex digits", found=digits
                )
            code_point = int(digits, 16)
            if code_point > _MAX_CODE_POINT or 0xD800 <= code_point <= 0xDFFF:
                raise InvalidEscapeSequenceError(
                    f"Escape does not name a Unicode scalar value: U+{code_point:X}", offset=offset + i
                )
            result.append(chr(code_point))
            i = close + 1
        elif marker == "u":
            result.append(_read_hex_escape(value, i, 4, offset))
            i += 6
        elif marker == "x":
            result.append(_read_hex_escape(value, i, 2, offset))
            i += 4
        else:
            raise InvalidEscapeSequenceError(
                "Unrecognized escape sequence", offset=offset + i, found=BACKSLASH + marker
            )

    return "".join(result)


def _read_hex_escape(value: str, index: int, width: int, offset: int) -> str:
    digits = value[index + 2 : index + 2 + width]
    if len(digits) != width or not _is_hex(digits):
        raise InvalidEscapeSequenceError(
            f"Malformed \\{value[index + 1]} escape",
            offset=offset + index,
            expected=f"{width} hex digits",
            found=digits,
        )
    return chr(int(digits, 16))


def _is_hex(digits: str) -> bool:
    return _RE_HEX.fullmatch(digits) is not None
