from __future__ import annotations

import re
from collections import Counter

from ats_analyzer.lexicon import STOP_WORDS

_NON_WORD_RE = re.compile(r"[^\w\s]")
_MIN_TOKEN_LENGTH = 3


def extract_keywords(text: str) -> Counter[str]:
    """Case-insensitive token frequency map without stop words or tokens shorter than 3 chars."""
    cleaned = _NON_WORD_RE.sub("", (text or "").lower())
    tokens = [
        token
        for token in cleaned.split()
        if len(token) >= _MIN_TOKEN_LENGTH and token not in STOP_WORDS
    ]
    return Counter(tokens)


def top_keywords(frequency: Counter[str], limit: int) -> list[str]:
    # most_common() keeps first-seen order between equal counts.
    return [word for word, _ in frequency.most_common(max(0, limit))]
