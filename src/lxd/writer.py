"""Output buffer for the encoder."""

from typing import List


class TextWriter:
    """Collects encoded fragments in order and joins them once."""

    def __init__(self) -> None:
        self._parts: List[str] = []

    def push(self, *fragments: str) -> None:
        self._parts.extend(fragments)

    def to_string(self) -> str:
        return "".join(self._parts)
