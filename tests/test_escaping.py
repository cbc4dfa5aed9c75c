import pytest

from lxd import FIELD_DELIMITER, KEY_VALUE_SEPARATOR, META_END, RECORD_END, RECORD_START, escape, unescape
from lxd.errors import InvalidEscapeSequenceError


def test_escape_reserved_code_points_as_unicode_escapes() -> None:
    raw = RECORD_START + RECORD_END + FIELD_DELIMITER + KEY_VALUE_SEPARATOR + META_END

    assert escape(raw) == "\\u257E\\u257C\\u257D\\uA789\\u2B1A"


def test_escape_control_and_quote_characters_use_short_forms() -> None:
    assert escape("a\\b\r\n\t'\"") == "a\\\\b\\r\\n\\t\\'\\\""


def test_escape_passes_other_characters_through() -> None:
    text = "héllo wörld ☃ 😀 {}[]:,"

    assert escape(text) == text


def test_escape_output_contains_no_reserved_code_points() -> None:
    escaped = escape("x" + RECORD_START + "y" + KEY_VALUE_SEPARATOR)

    assert not any(char in escaped for char in (RECORD_START, RECORD_END, FIELD_DELIMITER, KEY_VALUE_SEPARATOR))


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "plain",
        "\\",
        "\\u257E",
        "\\x41",
        RECORD_START + "abc",
        "C:\\temp\\new",
        "line one\nline two\r\n\ttabbed",
        "'single' and \"double\"",
        "".join([RECORD_START, RECORD_END, FIELD_DELIMITER, KEY_VALUE_SEPARATOR, META_END]),
        "emoji 😀 and cjk 数据",
    ],
)
def test_unescape_inverts_escape(raw: str) -> None:
    assert unescape(escape(raw)) == raw


def test_unescape_accepts_lowercase_hex() -> None:
    assert unescape("\\u257e\\ua789") == RECORD_START + KEY_VALUE_SEPARATOR


def test_unescape_accepts_legacy_hex_form() -> None:
    assert unescape("\\x41\\x7e") == "A~"


def test_unescape_legacy_hex_form_reads_exactly_two_digits() -> None:
    assert unescape("\\x257E") == "%7E"


def test_unescape_accepts_braced_code_points_above_basic_plane() -> None:
    assert unescape("\\u{1F600}!") == "😀!"


def test_unescape_reads_exactly_four_hex_digits() -> None:
    assert unescape("\\u257Eabc") == RECORD_START + "abc"


@pytest.mark.parametrize(
    "text",
    [
        "abc\\",
        "\\q",
        "\\u12",
        "\\u12G4",
        "\\x4",
        "\\xZZ",
        "\\u{}",
        "\\u{12",
        "\\u{110000}",
        "\\u{D800}",
        "\\u{1234567}",
    ],
)
def test_unescape_rejects_malformed_escapes(text: str) -> None:
    with pytest.raises(InvalidEscapeSequenceError):
        unescape(text)


def test_unescape_error_reports_document_offset() -> None:
    with pytest.raises(InvalidEscapeSequenceError) as excinfo:
        unescape("ab\\q", offset=10)

    assert excinfo.value.offset == 12
    assert "offset 12" in str(excinfo.value)
