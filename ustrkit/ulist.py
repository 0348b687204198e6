"""Operations on lists of UStr values: join, insert, remove and split."""

from __future__ import annotations

from collections.abc import Iterable

from ustrkit.ustr import UStr


def _coerce(value: UStr | str) -> UStr:
    return value if isinstance(value, UStr) else UStr(value)


def join(items: Iterable[UStr | str], separator: UStr | str) -> UStr:
    """Return all strings in ``items`` joined by ``separator``."""
    sep = _coerce(separator)
    return UStr(sep.contents.join(_coerce(item).contents for item in items))


def insert(items: list[UStr], s: UStr | str, index: int) -> None:
    """Insert ``s`` into ``items`` at ``index``, shifting later elements right.

    Valid indices run from 0 to ``len(items)`` inclusive; any other index
    raises IndexError.
    """
    if not 0 <= index <= len(items):
        raise IndexError(f"insert index {index} out of range")
    items.insert(index, _coerce(s))


def remove_at(items: list[UStr], index: int) -> UStr:
    """Remove and return the element at ``index``.

    Raises IndexError if ``index`` does not name an element.
    """
    if not 0 <= index < len(items):
        raise IndexError(f"remove index {index} out of range")
    return items.pop(index)


def split(s: UStr | str, separator: UStr | str) -> list[UStr]:
    """Split ``s`` on every occurrence of ``separator``.

    An empty separator yields a single-element list holding ``s``. A
    trailing separator produces a trailing empty string.
    """
    text = _coerce(s)
    sep = _coerce(separator)
    if not sep.contents:
        return [text]
    return [UStr(part) for part in text.contents.split(sep.contents)]