"""Tagged dynamic value representing one LXD variant."""

import datetime as dt
import math
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, ItemsView, Iterator, KeysView, List, Optional, Tuple, Union

from .constants import (
    BOOLEAN_LETTER,
    DICT_LETTER,
    FALSE_LITERAL,
    LEGACY_FLOAT_LETTER,
    LIST_LETTER,
    NUMBER_LETTER,
    STRING_LETTER,
    TIMESTAMP_LETTER,
    TRUE_LITERAL,
)
from .errors import (
    DateFormatError,
    InvalidContainerOperationError,
    NumberFormatError,
    TypeMismatchError,
    UnsupportedTypeError,
)
from .normalize import normalize_number, normalize_timestamp, normalize_value
from .primitives import format_boolean, format_number, format_timestamp, parse_number, parse_timestamp


class Kind(Enum):
    """LXD variants, valued by their canonical type letter."""

    STRING = STRING_LETTER
    NUMBER = NUMBER_LETTER
    BOOLEAN = BOOLEAN_LETTER
    TIMESTAMP = TIMESTAMP_LETTER
    LIST = LIST_LETTER
    DICT = DICT_LETTER

    @property
    def label(self) -> str:
        return self.name.lower()


_ITERABLE_KINDS = (Kind.STRING, Kind.LIST, Kind.DICT)


class Value:
    """A tagged value holding exactly one LXD variant.

    Construct from a native value (``str``, ``bool``, ``int``, ``float``,
    ``datetime``/``date``, mappings with string keys, lists/tuples, or model-like
    objects) or from another ``Value``, whose variant and payload are copied and
    whose ``strict`` flag is inherited unless overridden.

    With ``strict`` set, typed accessors only read the matching variant. Without
    it they coerce where a sensible conversion exists.

    Iteration yields list elements, dict values in insertion order, or one
    single-character string ``Value`` per character of a string.
    """

    __slots__ = ("_kind", "_payload", "strict")

    def __init__(self, value: Any, strict: Optional[bool] = None) -> None:
        try:
            self._assign(value, strict)
        except RecursionError as exc:
            raise UnsupportedTypeError("Value nests too deeply or contains itself") from exc

    @classmethod
    def _build(cls, value: Any, strict: Optional[bool] = None) -> "Value":
        built = cls.__new__(cls)
        built._assign(value, strict)
        return built

    def _assign(self, value: Any, strict: Optional[bool]) -> None:
        if isinstance(value, Value):
            self.strict = value.strict if strict is None else strict
            self._kind = value._kind
            self._payload = value._copy_payload()
            return

        self.strict = bool(strict)
        self._kind, self._payload = self._classify(normalize_value(value))

    def _classify(self, native: Any) -> Tuple[Kind, Any]:
        if isinstance(native, bool):
            return Kind.BOOLEAN, native
        if isinstance(native, (int, float)):
            return Kind.NUMBER, normalize_number(native)
        if isinstance(native, str):
            return Kind.STRING, native
        if isinstance(native, dt.date):
            return Kind.TIMESTAMP, normalize_timestamp(native)
        if isinstance(native, Mapping):
            entries: Dict[str, Value] = {}
            for key, item in native.items():
                if not isinstance(key, str):
                    raise UnsupportedTypeError("Dict keys must be strings", found=key)
                entries[key] = self._adopt(item)
            return Kind.DICT, entries
        if isinstance(native, (list, tuple)):
            return Kind.LIST, [self._adopt(item) for item in native]
        raise UnsupportedTypeError(f"Unsupported type: {type(native).__name__}", found=native)

    def _adopt(self, item: Any) -> "Value":
        if isinstance(item, Value):
            return item
        return Value._build(item, self.strict)

    def _copy_payload(self) -> Any:
        if self._kind is Kind.LIST:
            return [Value._build(item) for item in self._payload]
        if self._kind is Kind.DICT:
            return {key: Value._build(item) for key, item in self._payload.items()}
        return self._payload

    # Introspection

    @property
    def kind(self) -> Kind:
        return self._kind

    @property
    def type_letter(self) -> str:
        return self._kind.value

    @property
    def payload(self) -> Any:
        """Raw payload; containers are exposed as read-only views."""
        if self._kind is Kind.LIST:
            return tuple(self._payload)
        if self._kind is Kind.DICT:
            return MappingProxyType(self._payload)
        return self._payload

    def copy(self) -> "Value":
        return Value(self)

    def to_python(self) -> Any:
        """Unwrap recursively into plain Python values."""
        if self._kind is Kind.LIST:
            return [item.to_python() for item in self._payload]
        if self._kind is Kind.DICT:
            return {key: item.to_python() for key, item in self._payload.items()}
        return self._payload

    # Typed accessors

    def as_type(self, target: type) -> Any:
        """Read the payload as ``target``.

        Args:
            target: One of ``str``, ``float``, ``int``, ``bool``, ``datetime``,
                ``list`` or ``dict``

        Raises:
            TypeMismatchError: If the value cannot be read as ``target``
        """
        reader = _READERS.get(target)
        if reader is None:
            raise TypeMismatchError(f"No accessor for {target!r}", found=self._kind.label)
        return reader(self)

    def as_str(self) -> str:
        if self._kind is Kind.STRING:
            return self._payload
        self._require_lenient("str")
        if self._kind is Kind.NUMBER:
            return format_number(self._payload)
        if self._kind is Kind.BOOLEAN:
            return format_boolean(self._payload)
        if self._kind is Kind.TIMESTAMP:
            return format_timestamp(self._payload)
        raise self._mismatch("str")

    def as_float(self) -> float:
        if self._kind is Kind.NUMBER:
            return self._payload
        self._require_lenient("float")
        if self._kind is Kind.BOOLEAN:
            return 1.0 if self._payload else 0.0
        if self._kind is Kind.STRING:
            try:
                return parse_number(self._payload.strip(), LEGACY_FLOAT_LETTER)
            except NumberFormatError as exc:
                raise self._mismatch("float") from exc
        raise self._mismatch("float")

    def as_int(self) -> int:
        if self._kind is Kind.NUMBER:
            number = self._payload
            if self.strict and not number.is_integer():
                raise self._mismatch("int")
        else:
            self._require_lenient("int")
            number = self.as_float()
        if not math.isfinite(number):
            raise self._mismatch("int")
        return int(number)

    def as_bool(self) -> bool:
        if self._kind is Kind.BOOLEAN:
            return self._payload
        self._require_lenient("bool")
        if self._kind is Kind.NUMBER:
            return self._payload != 0
        if self._kind is Kind.STRING and self._payload in (TRUE_LITERAL, FALSE_LITERAL):
            return self._payload == TRUE_LITERAL
        raise self._mismatch("bool")

    def as_datetime(self) -> dt.datetime:
        if self._kind is Kind.TIMESTAMP:
            return self._payload
        self._require_lenient("datetime")
        if self._kind is Kind.STRING:
            try:
                return parse_timestamp(self._payload)
            except DateFormatError as exc:
                raise self._mismatch("datetime") from exc
        if self._kind is Kind.NUMBER:
            try:
                return dt.datetime.fromtimestamp(self._payload, tz=dt.timezone.utc)
            except (OverflowError, ValueError, OSError) as exc:
                raise self._mismatch("datetime") from exc
        raise self._mismatch("datetime")

    def as_list(self) -> List["Value"]:
        if self._kind is not Kind.LIST:
            raise self._mismatch("list")
        return list(self._payload)

    def as_dict(self) -> Dict[str, "Value"]:
        if self._kind is not Kind.DICT:
            raise self._mismatch("dict")
        return dict(self._payload)

    def __int__(self) -> int:
        return self.as_int()

    def __float__(self) -> float:
        return self.as_float()

    def _require_lenient(self, target: str) -> None:
        if self.strict:
            raise self._mismatch(target)

    def _mismatch(self, target: str) -> TypeMismatchError:
        return TypeMismatchError(
            f"Cannot read {self._kind.label} value as {target}{' in strict mode' if self.strict else ''}",
            expected=target,
            found=self._kind.label,
        )

    # Container operations

    def __getitem__(self, key: Union[int, str]) -> "Value":
        self._check_key(key, "Indexing")
        return self._payload[key]

    def __setitem__(self, key: Union[int, str], item: Any) -> None:
        self._check_key(key, "Item assignment")
        self._payload[key] = self._adopt(item)

    def __delitem__(self, key: Union[int, str]) -> None:
        self._check_key(key, "Item deletion")
        del self._payload[key]

    def get(self, key: str, default: Any = None) -> Any:
        self._require(Kind.DICT, operation="get()")
        return self._payload.get(key, default)

    def keys(self) -> KeysView:
        self._require(Kind.DICT, operation="keys()")
        return self._payload.keys()

    def items(self) -> ItemsView:
        self._require(Kind.DICT, operation="items()")
        return self._payload.items()

    def append(self, item: Any) -> None:
        self._require(Kind.LIST, operation="append()")
        self._payload.append(self._adopt(item))

    def insert(self, index: int, item: Any) -> None:
        self._require(Kind.LIST, operation="insert()")
        self._payload.insert(index, self._adopt(item))

    def pop(self, key: Union[int, str] = -1) -> "Value":
        self._check_key(key, "pop()")
        return self._payload.pop(key)

    def clear(self) -> None:
        self._require(Kind.LIST, Kind.DICT, operation="clear()")
        self._payload.clear()

    def __len__(self) -> int:
        self._require(*_ITERABLE_KINDS, operation="len()")
        return len(self._payload)

    def __contains__(self, item: Any) -> bool:
        self._require(*_ITERABLE_KINDS, operation="Membership test")
        if self._kind is Kind.DICT:
            return item in self._payload
        if self._kind is Kind.STRING:
            return isinstance(item, str) and item in self._payload
        try:
            candidate = self._adopt(item)
        except UnsupportedTypeError:
            return False
        return candidate in self._payload

    def __iter__(self) -> Iterator["Value"]:
        self._require(*_ITERABLE_KINDS, operation="Iteration")
        if self._kind is Kind.LIST:
            return iter(self._payload)
        if self._kind is Kind.DICT:
            return iter(self._payload.values())
        # Legacy behaviour: strings iterate as single-character strings
        return (Value(char, self.strict) for char in self._payload)

    def _check_key(self, key: Any, operation: str) -> None:
        self._require(Kind.LIST, Kind.DICT, operation=operation)
        if self._kind is Kind.LIST and (not isinstance(key, int) or isinstance(key, bool)):
            raise InvalidContainerOperationError("List indices must be integers", found=key)
        if self._kind is Kind.DICT and not isinstance(key, str):
            raise InvalidContainerOperationError("Dict keys must be strings", found=key)

    def _require(self, *kinds: Kind, operation: str) -> None:
        if self._kind not in kinds:
            raise InvalidContainerOperationError(
                f"{operation} is not supported on {self._kind.label} values",
                expected=" or ".join(kind.label for kind in kinds),
                found=self._kind.label,
            )

    # Comparison and display

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._kind is other._kind and self._payload == other._payload

    __hash__ = None  # type: ignore[assignment]

    def __bool__(self) -> bool:
        if self._kind is Kind.TIMESTAMP:
            return True
        return bool(self._payload)

    def __repr__(self) -> str:
        strict = ", strict=True" if self.strict else ""
        return f"Value({self._kind.name}, {self._payload!r}{strict})"


_READERS: Dict[type, Callable[[Value], Any]] = {
    str: Value.as_str,
    float: Value.as_float,
    int: Value.as_int,
    bool: Value.as_bool,
    dt.datetime: Value.as_datetime,
    list: Value.as_list,
    dict: Value.as_dict,
}
