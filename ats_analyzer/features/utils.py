from __future__ import annotations

import math
import re

_NON_LETTER_RE = re.compile(r"[^a-z]")


def round_half_up(value: float) -> int:
    """Round halves away from zero for non-negative scores (2.5 -> 3), unlike round()."""
    return int(math.floor(value + 0.5))


def clamp_int(value: int, min_value: int, max_value: int) -> int:
    return max(min_value, min(max_value, value))


def first_word(line: str) -> str:
    """First space-delimited word of a bullet, lower-cased and reduced to ASCII letters."""
    return _NON_LETTER_RE.sub("", line.split(" ")[0].lower())
