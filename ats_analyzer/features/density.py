from __future__ import annotations

import re
from collections import Counter

from ats_analyzer.core.config import get_scoring_value
from ats_analyzer.schemas.ats import DensityStatus, KeywordDensityEntry

from .keywords import top_keywords

_WHITESPACE_RE = re.compile(r"\s+")


def _density_status(density: float, low_below: float, high_above: float) -> DensityStatus:
    if density < low_below:
        return "low"
    if density > high_above:
        return "high"
    return "optimal"


def analyze_keyword_density(jd_keywords: Counter[str], resume_text: str) -> list[KeywordDensityEntry]:
    limit = int(get_scoring_value("ats.density.top_keywords", 5))
    low_below = float(get_scoring_value("ats.density.low_below", 1.0))
    high_above = float(get_scoring_value("ats.density.high_above", 4.0))

    lowered = resume_text.lower()
    total_words = len(_WHITESPACE_RE.split(lowered))

    entries: list[KeywordDensityEntry] = []
    for keyword in top_keywords(jd_keywords, limit):
        count = len(re.findall(rf"\b{re.escape(keyword)}\b", lowered))
        density = count / total_words * 100
        entries.append(
            KeywordDensityEntry(
                keyword=keyword,
                count=count,
                density=density,
                status=_density_status(density, low_below, high_above),
            )
        )
    return entries
