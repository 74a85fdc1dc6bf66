"""
textops - Mutable Text Buffer.

``TextBuffer`` is a caller-owned holder for a string. The functions in this
module apply the replace and remove operations from ``textops.strings`` and
write the result back into the buffer instead of returning it.

A buffer must not be shared between threads while one of these functions
is running on it.
"""

from __future__ import annotations

from dataclasses import dataclass

from textops.strings import (
    Needles,
    substr_remove_all_ret,
    substr_remove_ret,
    substr_replace_all_ret,
    substr_replace_ret,
)


@dataclass
class TextBuffer:
    """A mutable string holder."""

    value: str = ""

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)


def replace(search: str, replace: str, buffer: TextBuffer) -> None:
    """In-place ``substr_replace_ret``: replace the first occurrence."""
    buffer.value = substr_replace_ret(search, replace, buffer.value)


def substr_replace_all(search: Needles, replace: Needles, buffer: TextBuffer) -> None:
    """In-place ``substr_replace_all_ret`` (single or multi-needle)."""
    buffer.value = substr_replace_all_ret(search, replace, buffer.value)


def substr_remove(buffer: TextBuffer, removable: str) -> None:
    """In-place ``substr_remove_ret``: remove the first occurrence."""
    buffer.value = substr_remove_ret(buffer.value, removable)


def substr_remove_all(buffer: TextBuffer, removables: Needles) -> None:
    """In-place ``substr_remove_all_ret``."""
    buffer.value = substr_remove_all_ret(buffer.value, removables)
