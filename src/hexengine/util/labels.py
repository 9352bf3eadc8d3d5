"""Board cell labels such as ``K15``.

Rows are lettered A..Z, AA..AZ, ... (bijective base 26) and columns are
numbered from 1.
"""

from __future__ import annotations

import re
import string

from hexengine.models.offset import OffsetCoord

_LABEL_RE = re.compile(r"^([A-Z]+)(\d+)$")


def row_letters(row: int) -> str:
    """Letters for a 0-based row: 0 -> "A", 25 -> "Z", 26 -> "AA"."""
    if row < 0:
        raise ValueError(f"Row must be >= 0, got {row}")
    letters = ""
    n = row + 1
    while n:
        n, rem = divmod(n - 1, 26)
        letters = string.ascii_uppercase[rem] + letters
    return letters


def format_label(offset: OffsetCoord) -> str:
    return f"{row_letters(offset.row)}{offset.col + 1}"


def parse_label(text: str) -> OffsetCoord:
    """Parse a label like ``"K15"`` (case-insensitive) into an offset.

    The result is not checked against the board size.

    Raises:
        ValueError: If ``text`` is not letters followed by a column >= 1.
    """
    match = _LABEL_RE.match(text.strip().upper())
    if not match:
        raise ValueError(f"Invalid hex label: {text!r}")
    letters, number = match.groups()
    col = int(number) - 1
    if col < 0:
        raise ValueError(f"Invalid hex label: {text!r} (columns start at 1)")

    row = 0
    for ch in letters:
        row = row * 26 + (ord(ch) - ord("A") + 1)
    return OffsetCoord(col, row - 1)
