"""Core LXD decoding functionality."""

import re
from typing import Optional, Union

from .constants import (
    BOOLEAN_LETTER,
    DECODE_MARKER,
    DICT_LETTER,
    FIELD_DELIMITER,
    KEY_VALUE_SEPARATOR,
    LEGACY_FLOAT_LETTER,
    LEGACY_INTEGER_LETTER,
    LIST_LETTER,
    NUMBER_LETTER,
    RECORD_END,
    RECORD_START,
    STRING_LETTER,
    STRUCTURAL_CHARS,
    TIMESTAMP_LETTER,
    TYPE_LEGEND,
)
from .errors import (
    LxdDecodeError,
    MalformedRecordError,
    NestingTooDeepError,
    UnexpectedEndOfInputError,
    UnknownTypeLetterError,
)
from .escaping import unescape
from .primitives import parse_boolean, parse_number, parse_timestamp
from .types import DecodeOptions, NativeValue, ResolvedDecodeOptions
from .value import Value

_RE_STRUCTURAL = re.compile(f"[{re.escape(STRUCTURAL_CHARS)}]")

_SCALAR_LETTERS = frozenset(
    (STRING_LETTER, NUMBER_LETTER, BOOLEAN_LETTER, TIMESTAMP_LETTER, LEGACY_INTEGER_LETTER, LEGACY_FLOAT_LETTER)
)
_KNOWN_LETTERS = ", ".join(TYPE_LEGEND)


def decode(
    text: Union[str, bytes], options: Optional[DecodeOptions] = None
) -> Union[Value, NativeValue]:
    """Decode an LXD-formatted string.

    Args:
        text: LXD text, or its UTF-8 encoding
        options: Optional decoding options

    Returns:
        The decoded Value tree, or plain Python values when ``native`` is set

    Raises:
        LxdDecodeError: If the input is malformed; the subclass names the fault
    """
    resolved_options = resolve_decode_options(options)
    if isinstance(text, (bytes, bytearray)):
        text = _decode_utf8(bytes(text))
    elif not isinstance(text, str):
        raise TypeError(f"decode() expects str or bytes, not {type(text).__name__}")

    if resolved_options.debug:
        resolved_options.sink(f"{DECODE_MARKER}{text}")

    value = Decoder(text, strict=resolved_options.strict).decode()
    return value.to_python() if resolved_options.native else value


def resolve_decode_options(options: Optional[DecodeOptions]) -> ResolvedDecodeOptions:
    """Resolve decoding options with defaults.

    Args:
        options: Optional user-provided options

    Returns:
        Resolved options with defaults applied
    """
    if options is None:
        return ResolvedDecodeOptions()

    return ResolvedDecodeOptions(
        debug=options.get("debug", False),
        sink=options.get("sink"),
        strict=options.get("strict", False),
        native=options.get("native", False),
    )


def _decode_utf8(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise LxdDecodeError("Input is not valid UTF-8", offset=exc.start) from exc


class Decoder:
    """Recursive-descent parser over one complete LXD document.

    The cursor only moves forward. Scalars are scanned up to the next field
    delimiter or record end, which is left for the enclosing record to consume.
    """

    def __init__(self, text: str, strict: bool = False) -> None:
        self._text = text
        self._length = len(text)
        self._index = 0
        self._strict = strict

    def decode(self) -> Value:
        try:
            value = self._decode_value()
        except RecursionError as exc:
            raise NestingTooDeepError("Records nest too deeply to decode", offset=self._index) from exc
        if self._index < self._length:
            raise MalformedRecordError(
                "Unexpected data after top-level value",
                offset=self._index,
                expected="end of input",
                found=self._text[self._index],
            )
        return value

    def _peek(self) -> Optional[str]:
        if self._index >= self._length:
            return None
        return self._text[self._index]

    def _expect(self, char: str, name: str) -> None:
        found = self._peek()
        if found is None:
            raise UnexpectedEndOfInputError(f"Input ended before {name}", offset=self._index, expected=char)
        if found != char:
            raise MalformedRecordError(f"Missing {name}", offset=self._index, expected=char, found=found)
        self._index += 1

    def _decode_value(self) -> Value:
        letter = self._peek()
        if letter is None:
            raise UnexpectedEndOfInputError("Input ended before a type letter", offset=self._index)
        if letter == LIST_LETTER:
            return self._decode_list()
        if letter == DICT_LETTER:
            return self._decode_dict()
        if letter not in _SCALAR_LETTERS:
            raise UnknownTypeLetterError(
                "Unknown type letter", offset=self._index, expected=f"one of {_KNOWN_LETTERS}", found=letter
            )

        self._index += 1
        start = self._index
        text = unescape(self._scan_scalar(), start)
        if letter == STRING_LETTER:
            payload = text
        elif letter == BOOLEAN_LETTER:
            payload = parse_boolean(text, start)
        elif letter == TIMESTAMP_LETTER:
            payload = parse_timestamp(text, start)
        else:
            payload = parse_number(text, letter, start)
        return Value._build(payload, self._strict)

    def _scan_scalar(self) -> str:
        match = _RE_STRUCTURAL.search(self._text, self._index)
        end = self._length if match is None else match.start()
        if match is not None and match.group() not in (FIELD_DELIMITER, RECORD_END):
            raise MalformedRecordError(
                "Unescaped reserved character in payload", offset=end, found=match.group()
            )
        raw = self._text[self._index : end]
        self._index = end
        return raw

    def _scan_key(self) -> str:
        start = self._index
        match = _RE_STRUCTURAL.search(self._text, start)
        if match is None:
            raise UnexpectedEndOfInputError(
                "Input ended before key/value separator", offset=self._length, expected=KEY_VALUE_SEPARATOR
            )
        if match.group() != KEY_VALUE_SEPARATOR:
            raise MalformedRecordError(
                "Missing key/value separator",
                offset=match.start(),
                expected=KEY_VALUE_SEPARATOR,
                found=match.group(),
            )
        self._index = match.end()
        return unescape(self._text[start : match.start()], start)

    def _decode_list(self) -> Value:
        self._index += 1
        self._expect(RECORD_START, "record start")
        items = []
        while self._at_field():
            items.append(self._decode_value())
            self._finish_field()
        self._index += 1
        return Value._build(items, self._strict)

    def _decode_dict(self) -> Value:
        self._index += 1
        self._expect(RECORD_START, "record start")
        entries = {}
        while self._at_field():
            key = self._scan_key()
            # Duplicate keys overwrite in place
            entries[key] = self._decode_value()
            self._finish_field()
        self._index += 1
        return Value._build(entries, self._strict)

    def _at_field(self) -> bool:
        char = self._peek()
        if char is None:
            raise UnexpectedEndOfInputError("Input ended inside record", offset=self._index, expected=RECORD_END)
        return char != RECORD_END

    def _finish_field(self) -> None:
        char = self._peek()
        if char == FIELD_DELIMITER:
            self._index += 1
            return
        if char is None:
            raise UnexpectedEndOfInputError("Input ended inside record", offset=self._index, expected=RECORD_END)
        if char != RECORD_END:
            raise MalformedRecordError(
                "Missing field delimiter or record end",
                offset=self._index,
                expected=f"{FIELD_DELIMITER} or {RECORD_END}",
                found=char,
            )
