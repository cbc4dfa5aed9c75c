"""
lxd - Lightweight Exchange of Data for Python

A compact, self-describing, hierarchical text encoding. Values carry a one-letter
type prefix and containers are bracketed by rarely used Unicode code points, so
any payload can be carried after escaping without quoting rules.
"""

from .constants import (
    FIELD_DELIMITER,
    KEY_VALUE_SEPARATOR,
    MEDIA_TYPE,
    META_END,
    RECORD_END,
    RECORD_START,
    TYPE_LEGEND,
)
from .decoder import decode
from .encoder import encode
from .errors import (
    BooleanFormatError,
    DateFormatError,
    InvalidContainerOperationError,
    InvalidEscapeSequenceError,
    LxdDecodeError,
    LxdEncodeError,
    LxdError,
    MalformedRecordError,
    NestingTooDeepError,
    NumberFormatError,
    TypeMismatchError,
    UnexpectedEndOfInputError,
    UnknownTypeLetterError,
    UnsupportedTypeError,
)
from .escaping import escape, unescape
from .types import DecodeOptions, DiagnosticSink, EncodeOptions
from .value import Kind, Value

__version__ = "0.1.0"
__all__ = [
    "encode",
    "decode",
    "escape",
    "unescape",
    "Value",
    "Kind",
    "EncodeOptions",
    "DecodeOptions",
    "DiagnosticSink",
    "LxdError",
    "LxdEncodeError",
    "LxdDecodeError",
    "UnsupportedTypeError",
    "MalformedRecordError",
    "UnexpectedEndOfInputError",
    "UnknownTypeLetterError",
    "InvalidEscapeSequenceError",
    "NumberFormatError",
    "BooleanFormatError",
    "DateFormatError",
    "NestingTooDeepError",
    "TypeMismatchError",
    "InvalidContainerOperationError",
    "RECORD_START",
    "RECORD_END",
    "FIELD_DELIMITER",
    "KEY_VALUE_SEPARATOR",
    "META_END",
    "MEDIA_TYPE",
    "TYPE_LEGEND",
]
