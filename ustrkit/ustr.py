"""An immutable Unicode string that knows its code point and byte lengths."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property


@dataclass(frozen=True)
class UStr:
    """A string of Unicode code points with UTF-8 size information.

    All indices are code point indices, never byte indices.
    """

    contents: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.contents, (bytes, bytearray, memoryview)):
            object.__setattr__(self, "contents", bytes(self.contents).decode("utf-8"))
        elif not isinstance(self.contents, str):
            raise TypeError(f"UStr contents must be str or bytes, not {type(self.contents).__name__}")

    @cached_property
    def encoded(self) -> bytes:
        """The UTF-8 encoding of the contents."""
        return self.contents.encode("utf-8")

    @property
    def codepoints(self) -> int:
        return len(self.contents)

    @property
    def nbytes(self) -> int:
        return len(self.encoded)

    @property
    def is_ascii(self) -> bool:
        return self.contents.isascii()

    def __len__(self) -> int:
        return self.codepoints

    def __str__(self) -> str:
        return self.contents

    def describe(self) -> str:
        """Return the contents followed by their code point and byte counts."""
        return f"{self.contents} [codepoints: {self.codepoints} | bytes: {self.nbytes}]"

    def substring(self, start: int, end: int) -> UStr:
        """Return the code points from ``start`` (inclusive) to ``end`` (exclusive).

        An empty string is returned for an invalid range: a negative start,
        a start or end past the last code point, or an end before the start.
        """
        last = len(self) - 1
        if start < 0 or start > last or end > last or end < start:
            return UStr()
        return UStr(self.contents[start:end])

    def concat(self, other: UStr) -> UStr:
        """Return this string followed by ``other``."""
        return UStr(self.contents + str(other))

    def remove_at(self, index: int) -> UStr:
        """Return the string without the code point at ``index``.

        The string is returned unchanged if ``index`` is out of bounds.
        """
        if not 0 <= index < len(self):
            return self
        return UStr(self.contents[:index] + self.contents[index + 1:])

    def reverse(self) -> UStr:
        """Return the string with its code points in reverse order."""
        return UStr(self.contents[::-1])