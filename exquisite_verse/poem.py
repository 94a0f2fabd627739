"""Poems stored line by line, with base64 obfuscation of their lines."""

from __future__ import annotations

import base64
from collections.abc import Iterable, Iterator


class DeobfuscationError(ValueError):
    """Raised when an obfuscated line is not valid base64 or not UTF-8 text."""


def _encode(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def _decode(text: str) -> str:
    try:
        raw = base64.b64decode(text, validate=True)
    except ValueError as exc:
        raise DeobfuscationError(f"invalid base64 in {text!r}: {exc}") from exc
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DeobfuscationError(f"invalid UTF-8 in {text!r}: {exc}") from exc


def _non_blank(text: str) -> list[str]:
    return [line for line in text.split("\n") if line.strip()]


class Poem:
    """An ordered list of lines that can be shown in clear or obfuscated form."""

    __slots__ = ("_lines",)
    __hash__ = None  # mutable

    def __init__(self, text: str = "") -> None:
        self._lines: list[str] = _non_blank(text)

    @classmethod
    def _from_lines(cls, lines: Iterable[str]) -> Poem:
        poem = cls()
        poem._lines = list(lines)
        return poem

    @classmethod
    def from_semi_obfuscated(cls, text: str) -> Poem:
        """Decode every non-blank line but the last, which is kept as it is."""
        *hidden, last = _non_blank(text) or [None]
        if last is None:
            return cls()
        return cls._from_lines([*map(_decode, hidden), last])

    @classmethod
    def from_fully_obfuscated(cls, text: str) -> Poem:
        """Decode every non-blank line."""
        return cls._from_lines(map(_decode, _non_blank(text)))

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def add_line(self, line: str) -> None:
        self._lines.append(line)

    def line_as_base64(self, index: int) -> str:
        if not 0 <= index < len(self._lines):
            raise IndexError(f"line index {index} out of range for {len(self._lines)} lines")
        return _encode(self._lines[index])

    def as_cleartext(self) -> str:
        return "\n".join(self._lines)

    def as_semi_obfuscated(self) -> str:
        """Encode every line except the last one."""
        if not self._lines:
            return ""
        *hidden, last = self._lines
        return "\n".join([*map(_encode, hidden), last])

    def as_fully_obfuscated(self) -> str:
        return "\n".join(map(_encode, self._lines))

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Poem):
            return NotImplemented
        return self._lines == other._lines

    def __repr__(self) -> str:
        return f"Poem(lines={self._lines!r})"