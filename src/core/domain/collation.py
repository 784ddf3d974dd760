"""Locale-aware ordering of entity names.

Names compare the way a human reader expects rather than by code point:
accents and case only matter when the base letters are equal. Lowercase sorts
before uppercase at that last level, matching the usual root collation.
Python's sort is stable, so names with identical keys keep their original
relative order.
"""

from __future__ import annotations

import unicodedata
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")


def _strip_marks(value: str) -> str:
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def collation_key(value: str) -> tuple[str, str, str]:
    """Three-level key: base letters, then accents, then case."""

    normalized = unicodedata.normalize("NFC", value)
    primary = _strip_marks(normalized).casefold()
    secondary = normalized.casefold()
    tertiary = normalized.swapcase()
    return primary, secondary, tertiary


def sort_by_name(items: Iterable[T], *, name: Callable[[T], str]) -> list[T]:
    """Return a new list sorted by `name`; the input is never reordered."""

    copied = list(items)
    copied.sort(key=lambda item: collation_key(name(item)))
    return copied
