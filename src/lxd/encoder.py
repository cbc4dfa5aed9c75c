"""Core LXD encoding functionality."""

from typing import Optional, Union

from .constants import ENCODE_MARKER
from .encoders import encode_value
from .errors import UnsupportedTypeError
from .types import EncodeOptions, NativeValue, ResolvedEncodeOptions
from .value import Value
from .writer import TextWriter


def encode(value: Union[Value, NativeValue], options: Optional[EncodeOptions] = None) -> str:
    """Encode a value into LXD format.

    Args:
        value: A Value, or any native value a Value can be built from
        options: Optional encoding options

    Returns:
        LXD-formatted string

    Raises:
        UnsupportedTypeError: If some part of ``value`` has no LXD variant, or the
            tree is cyclic or too deep to walk
    """
    resolved_options = resolve_options(options)
    root = value if isinstance(value, Value) else Value(value)
    writer = TextWriter()
    try:
        encode_value(root, writer)
    except RecursionError as exc:
        raise UnsupportedTypeError("Value nests too deeply or contains itself") from exc
    text = writer.to_string()
    if resolved_options.debug:
        resolved_options.sink(f"{ENCODE_MARKER}{text}")
    return text


def resolve_options(options: Optional[EncodeOptions]) -> ResolvedEncodeOptions:
    """Resolve encoding options with defaults.

    Args:
        options: Optional user-provided options

    Returns:
        Resolved options with defaults applied
    """
    if options is None:
        return ResolvedEncodeOptions()

    return ResolvedEncodeOptions(
        debug=options.get("debug", False),
        sink=options.get("sink"),
    )
