"""Character ramps ordered by visual density."""

from __future__ import annotations

# Sparse -> dense. Index 0 is the blank cell.
DENSITY = " .'`^\",:;Il!i><~+_-=?][}{1)(|\\/tfjrxnuvczsXYUJCLQ0OZemwqpdbkhao*#MW&8%B@$"


def build_ramp(whitespace: int, reversed: bool = False) -> str:
    """Returns `whitespace` blanks followed by DENSITY, optionally reversed as a whole.

    The result is a new string every call; callers rebuild rather than mutate.
    """
    chars = " " * whitespace + DENSITY
    return chars[::-1] if reversed else chars
