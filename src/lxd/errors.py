"""Error taxonomy for LXD encoding and decoding."""

from typing import Any, Optional


class LxdError(Exception):
    """Base class for all LXD errors.

    Attributes:
        message: Human readable description
        offset: Character offset into the decoded text, when known
        expected: Token that was expected, when known
        found: Token that was found instead, when known
    """

    def __init__(
        self,
        message: str,
        *,
        offset: Optional[int] = None,
        expected: Optional[str] = None,
        found: Any = None,
    ) -> None:
        self.message = message
        self.offset = offset
        self.expected = expected
        self.found = found
        super().__init__(self._format())

    def _format(self) -> str:
        parts = [self.message]
        if self.offset is not None:
            parts.append(f"at offset {self.offset}")
        if self.expected is not None:
            parts.append(f"(expected {self.expected!r}, found {self.found!r})")
        elif self.found is not None:
            parts.append(f"(found {self.found!r})")
        return " ".join(parts)


class LxdEncodeError(LxdError):
    """Encoding or value construction failure."""


class LxdDecodeError(LxdError, ValueError):
    """Malformed LXD text."""


class UnsupportedTypeError(LxdEncodeError, TypeError):
    """A native value with no LXD variant."""


class MalformedRecordError(LxdDecodeError):
    """Missing or mismatched record delimiters."""


class UnexpectedEndOfInputError(MalformedRecordError):
    """Input ended before a required character; a truncated record."""


class UnknownTypeLetterError(LxdDecodeError):
    """Unrecognized type-letter prefix."""


class InvalidEscapeSequenceError(LxdDecodeError):
    """Backslash not followed by a recognized escape form."""


class NumberFormatError(LxdDecodeError):
    """Payload does not match the number grammar or leaves float64 range."""


class BooleanFormatError(LxdDecodeError):
    """Payload is neither `true` nor `false`."""


class DateFormatError(LxdDecodeError):
    """Payload is not an ISO-8601 timestamp with a UTC designator or offset."""


class NestingTooDeepError(LxdDecodeError):
    """Containers nest deeper than the interpreter stack allows."""


class TypeMismatchError(LxdError, TypeError):
    """Accessor invoked against a variant it cannot read."""


class InvalidContainerOperationError(LxdError, TypeError):
    """List, dict or iteration operation on an incompatible variant."""
