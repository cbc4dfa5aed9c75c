"""Constants for LXD encoding."""

import re
from typing import Dict, Final

# Structural characters
RECORD_START: Final[str] = "\u257e"  # BOX DRAWINGS HEAVY LEFT AND LIGHT RIGHT
RECORD_END: Final[str] = "\u257c"  # BOX DRAWINGS LIGHT LEFT AND HEAVY RIGHT
FIELD_DELIMITER: Final[str] = "\u257d"  # BOX DRAWINGS LIGHT UP AND HEAVY DOWN
KEY_VALUE_SEPARATOR: Final[str] = "\ua789"  # MODIFIER LETTER COLON
# Reserved for a metadata header; never structural, always escaped
META_END: Final[str] = "\u2b1a"  # DOTTED SQUARE

STRUCTURAL_CHARS: Final[str] = RECORD_START + RECORD_END + FIELD_DELIMITER + KEY_VALUE_SEPARATOR
RESERVED_CHARS: Final[str] = STRUCTURAL_CHARS + META_END

# Type letters
STRING_LETTER: Final[str] = "s"
NUMBER_LETTER: Final[str] = "n"
BOOLEAN_LETTER: Final[str] = "b"
TIMESTAMP_LETTER: Final[str] = "d"
LIST_LETTER: Final[str] = "L"
DICT_LETTER: Final[str] = "D"
LEGACY_INTEGER_LETTER: Final[str] = "i"
LEGACY_FLOAT_LETTER: Final[str] = "f"

TYPE_LEGEND: Final[Dict[str, str]] = {
    STRING_LETTER: "string",
    NUMBER_LETTER: "number",
    BOOLEAN_LETTER: "boolean",
    TIMESTAMP_LETTER: "timestamp",
    LIST_LETTER: "list",
    DICT_LETTER: "dict",
}

# Literals
TRUE_LITERAL: Final[str] = "true"
FALSE_LITERAL: Final[str] = "false"
UTC_DESIGNATOR: Final[str] = "Z"

# Escapes
BACKSLASH: Final[str] = "\\"
SHORT_ESCAPES: Final[Dict[str, str]] = {
    "\\": "\\\\",
    "\r": "\\r",
    "\n": "\\n",
    "\t": "\\t",
    "'": "\\'",
    '"': '\\"',
}
SHORT_UNESCAPES: Final[Dict[str, str]] = {v[1]: k for k, v in SHORT_ESCAPES.items()}

# Number grammars
NUMBER_REGEX = re.compile(r"(?:-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?|-?inf|nan)", re.ASCII)
LEGACY_INTEGER_REGEX = re.compile(r"[+-]?\d+", re.ASCII)
LEGACY_FLOAT_REGEX = re.compile(
    r"(?:[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?Infinity|NaN)",
    re.ASCII,
)
NON_FINITE_LITERALS: Final[Dict[str, float]] = {
    "inf": float("inf"),
    "-inf": float("-inf"),
    "nan": float("nan"),
    "Infinity": float("inf"),
    "+Infinity": float("inf"),
    "-Infinity": float("-inf"),
    "NaN": float("nan"),
}

# ISO-8601 timestamp with a mandatory UTC designator or offset
TIMESTAMP_REGEX = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})",
    re.ASCII,
)

# Diagnostic direction markers
ENCODE_MARKER: Final[str] = "•> "
DECODE_MARKER: Final[str] = "•<- "

MEDIA_TYPE: Final[str] = "text/vnd.lxd; charset=utf-8"
