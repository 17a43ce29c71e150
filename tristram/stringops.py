"""String helpers: case-insensitive comparison, affix checks and splitting.

Case folding follows the plain ASCII rules: only ``A``-``Z`` are lowered.
"""

from __future__ import annotations

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _fold(ch: str) -> str:
    return ch.translate(_ASCII_LOWER)


def lower_case(text: str) -> str:
    """Return a copy of ``text`` with ASCII letters lowered."""
    return text.translate(_ASCII_LOWER)


def ci_less(x: str, y: str) -> bool:
    """True if ``x`` sorts before ``y`` ignoring ASCII case."""
    return lower_case(x) < lower_case(y)


def ci_equal(x: str, y: str) -> bool:
    """True if ``x`` and ``y`` are equal ignoring ASCII case."""
    return len(x) == len(y) and lower_case(x) == lower_case(y)


def ci_compare_len(x: str, y: str, length: int) -> int:
    """Compare at most ``length`` characters of ``x`` and ``y`` ignoring case.

    Returns -1, 0 or 1. Where two characters differ other than by case, the
    sign comes from their raw code points.
    """
    compared = 0
    for a, b in zip(x, y):
        if compared >= length:
            return 0
        if a != b and _fold(a) != _fold(b):
            return 1 if ord(a) > ord(b) else -1
        compared += 1
    if compared < length:
        if len(x) > compared:
            return 1
        if len(y) > compared:
            return -1
    return 0


def contains_non_print(text: str) -> bool:
    """True if ``text`` holds any character outside printable ASCII."""
    return any(not (" " <= ch <= "~") for ch in text)


def ends_with(full: str, end: str) -> bool:
    """True if ``full`` ends with ``end``."""
    return full.endswith(end)


def ci_ends_with(full: str, end: str) -> bool:
    """True if ``full`` ends with ``end`` ignoring ASCII case."""
    return lower_case(full).endswith(lower_case(end))


def starts_with(full: str, start: str) -> bool:
    """True if ``full`` starts with ``start``."""
    return full.startswith(start)


def ci_starts_with(full: str, start: str) -> bool:
    """True if ``full`` starts with ``start`` ignoring ASCII case."""
    return lower_case(full).startswith(lower_case(start))


def replace_end(old_end: str, new_end: str, original: str) -> str:
    """Drop ``len(old_end)`` characters from ``original`` and append ``new_end``.

    The dropped characters are not checked. If ``old_end`` is longer than
    ``original``, nothing is dropped.
    """
    keep = len(original) - len(old_end)
    head = original if keep < 0 else original[:keep]
    return head + new_end


def split(text: str, delim: str) -> list[str]:
    """Split ``text`` on a single-character delimiter.

    Empty fields are kept, except that a trailing delimiter does not produce
    a final empty field and an empty string gives no fields at all.
    """
    if len(delim) != 1:
        raise ValueError("delimiter must be a single character")
    parts = text.split(delim)
    if parts[-1] == "":
        parts.pop()
    return parts