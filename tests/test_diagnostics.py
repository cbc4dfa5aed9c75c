import pytest
from loguru import logger

from lxd import MEDIA_TYPE, decode, encode


def test_encode_writes_text_to_sink_when_debug(captured_lines: list[str], capture_sink) -> None:
    text = encode({"a": 1}, {"debug": True, "sink": capture_sink})

    assert captured_lines == ["•> " + text]


def test_decode_writes_input_to_sink_when_debug(captured_lines: list[str], capture_sink) -> None:
    decode("sx", {"debug": True, "sink": capture_sink})

    assert captured_lines == ["•<- sx"]


def test_sink_is_silent_without_debug(captured_lines: list[str], capture_sink) -> None:
    encode("x", {"sink": capture_sink})
    decode("sx", {"sink": capture_sink, "debug": False})

    assert captured_lines == []


def test_debug_does_not_change_results(capture_sink) -> None:
    assert encode([1], {"debug": True, "sink": capture_sink}) == encode([1])
    assert decode("n1.0", {"debug": True, "sink": capture_sink}) == decode("n1.0")


def test_decode_sink_sees_input_even_when_decode_fails(captured_lines: list[str], capture_sink) -> None:
    with pytest.raises(ValueError):
        decode("x", {"debug": True, "sink": capture_sink})

    assert captured_lines == ["•<- x"]


def test_default_sink_logs_through_loguru() -> None:
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{extra[component]} {message}")
    try:
        encode("x", {"debug": True})
    finally:
        logger.remove(handler_id)

    assert any(message.startswith("lxd.diagnostics •> sx") for message in messages)


def test_media_type() -> None:
    assert MEDIA_TYPE == "text/vnd.lxd; charset=utf-8"
