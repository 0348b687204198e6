"""Byte-level helpers for measuring and indexing UTF-8 encoded data."""

from __future__ import annotations

from collections.abc import Iterator

_ASCII_LIMIT = 0x80


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _codepoint_starts(raw: bytes) -> Iterator[int]:
    """Yield the byte offset at which each code point begins."""
    pos = 0
    while pos < len(raw):
        yield pos
        pos += codepoint_size(raw[pos])


def is_ascii(data: bytes | bytearray | memoryview | str) -> bool:
    """Return True if every byte of ``data`` is plain ASCII."""
    return _as_bytes(data).isascii()


def is_continuation_byte(byte: int) -> bool:
    """Return True if ``byte`` is a UTF-8 continuation byte (10xxxxxx)."""
    return (byte & 0xC0) == 0x80


def codepoint_size(byte: int) -> int:
    """Return the length in bytes of the code point led by ``byte``.

    Raises ValueError if ``byte`` cannot start a UTF-8 sequence.
    """
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"not a byte value: {byte!r}")
    if byte < _ASCII_LIMIT:
        return 1
    if (byte & 0xE0) == 0xC0:
        return 2
    if (byte & 0xF0) == 0xE0:
        return 3
    if (byte & 0xF8) == 0xF0:
        return 4
    raise ValueError(f"invalid UTF-8 lead byte 0x{byte:02x}")


def utf8_strlen(data: bytes | bytearray | memoryview | str) -> int:
    """Return the number of code points in ``data``.

    Raises ValueError on an invalid lead byte.
    """
    return sum(1 for _ in _codepoint_starts(_as_bytes(data)))


def cpi_of_bi(data: bytes | bytearray | memoryview | str, byte_index: int) -> int:
    """Return the code point index at ``byte_index``.

    A byte index inside a multi-byte code point maps to the following code
    point. Raises IndexError if ``byte_index`` is outside the data and
    ValueError on invalid encoding.
    """
    raw = _as_bytes(data)
    if not 0 <= byte_index < len(raw):
        raise IndexError(f"byte index {byte_index} out of range")
    count = 0
    for start in _codepoint_starts(raw):
        if start >= byte_index:
            return count
        count += 1
    return count


def bi_of_cpi(data: bytes | bytearray | memoryview | str, codepoint_index: int) -> int:
    """Return the byte offset at which code point ``codepoint_index`` begins.

    The index one past the last code point maps to the end of the data.
    Raises IndexError if the index is out of range and ValueError on
    invalid encoding.
    """
    if codepoint_index < 0:
        raise IndexError(f"code point index {codepoint_index} out of range")
    raw = _as_bytes(data)
    pos = 0
    count = 0
    while count < codepoint_index and pos < len(raw):
        pos += codepoint_size(raw[pos])
        count += 1
    if count < codepoint_index:
        raise IndexError(f"code point index {codepoint_index} out of range")
    return pos