"""Type definitions for lxd."""

import datetime as dt
from typing import Any, Callable, Dict, List, Optional, TypedDict, Union

from .logging_utils import log_sink

# Native shapes accepted by Value and produced by Value.to_python()
NativeScalar = Union[str, int, float, bool, dt.datetime]
NativeValue = Union[NativeScalar, List[Any], Dict[str, Any]]

# Line-oriented writer receiving diagnostic text
DiagnosticSink = Callable[[str], None]


class EncodeOptions(TypedDict, total=False):
    """Options for LXD encoding.

    Attributes:
        debug: Write the encoded text to the diagnostic sink (default: False)
        sink: Diagnostic sink (default: loguru at DEBUG level)
    """

    debug: bool
    sink: DiagnosticSink


class DecodeOptions(TypedDict, total=False):
    """Options for LXD decoding.

    Attributes:
        debug: Write the input text to the diagnostic sink (default: False)
        sink: Diagnostic sink (default: loguru at DEBUG level)
        strict: Strict flag given to every decoded value (default: False)
        native: Return plain Python values instead of a Value tree (default: False)
    """

    debug: bool
    sink: DiagnosticSink
    strict: bool
    native: bool


class ResolvedEncodeOptions:
    """Resolved encoding options with defaults applied."""

    def __init__(self, debug: bool = False, sink: Optional[DiagnosticSink] = None) -> None:
        self.debug = debug
        self.sink: DiagnosticSink = sink or log_sink


class ResolvedDecodeOptions(ResolvedEncodeOptions):
    """Resolved decoding options with defaults applied."""

    def __init__(
        self,
        debug: bool = False,
        sink: Optional[DiagnosticSink] = None,
        strict: bool = False,
        native: bool = False,
    ) -> None:
        super().__init__(debug, sink)
        self.strict = strict
        self.native = native
