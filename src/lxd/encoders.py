"""Encoders for the different value variants."""

from .constants import DICT_LETTER, FIELD_DELIMITER, KEY_VALUE_SEPARATOR, LIST_LETTER, RECORD_END, RECORD_START
from .escaping import escape
from .primitives import format_boolean, format_number, format_timestamp
from .value import Kind, Value
from .writer import TextWriter


def encode_value(value: Value, writer: TextWriter) -> None:
    """Encode a value, type letter first, depth first.

    Args:
        value: Value to encode
        writer: Output buffer
    """
    if value.kind is Kind.LIST:
        encode_list(value, writer)
    elif value.kind is Kind.DICT:
        encode_dict(value, writer)
    else:
        writer.push(value.type_letter, encode_primitive(value))


def encode_primitive(value: Value) -> str:
    """Encode the payload of a scalar value, without its type letter.

    Args:
        value: STRING, NUMBER, BOOLEAN or TIMESTAMP value

    Returns:
        Payload text
    """
    if value.kind is Kind.STRING:
        return escape(value.payload)
    if value.kind is Kind.NUMBER:
        return format_number(value.payload)
    if value.kind is Kind.BOOLEAN:
        return format_boolean(value.payload)
    return format_timestamp(value.payload)


def encode_list(value: Value, writer: TextWriter) -> None:
    """Encode a list as ``L`` RecordStart, delimited elements, RecordEnd.

    Args:
        value: LIST value
        writer: Output buffer
    """
    writer.push(LIST_LETTER, RECORD_START)
    for index, item in enumerate(value):
        if index:
            writer.push(FIELD_DELIMITER)
        encode_value(item, writer)
    writer.push(RECORD_END)


def encode_dict(value: Value, writer: TextWriter) -> None:
    """Encode a dict as ``D`` RecordStart, delimited key/value pairs, RecordEnd.

    Pairs are written in insertion order.

    Args:
        value: DICT value
        writer: Output buffer
    """
    writer.push(DICT_LETTER, RECORD_START)
    for index, (key, item) in enumerate(value.items()):
        if index:
            writer.push(FIELD_DELIMITER)
        encode_key_value_pair(key, item, writer)
    writer.push(RECORD_END)


def encode_key_value_pair(key: str, value: Value, writer: TextWriter) -> None:
    writer.push(escape(key), KEY_VALUE_SEPARATOR)
    encode_value(value, writer)
