from __future__ import annotations

import re
from dataclasses import dataclass

from ats_analyzer.lexicon import ACTION_VERBS, CLICHES, WEAK_VERBS
from ats_analyzer.schemas.ats import BulletTip

from .utils import first_word

_METRIC_RE = re.compile(r"\d+%|\$\d+|\d+k|\d+\+|\d+x|by \d+|over \d+|under \d+", re.IGNORECASE)
_PASSIVE_MARKERS = (" was ", " were ", " been ", " being ")
_SUGGESTED_VERBS = ["Led", "Managed", "Built", "Developed", "Increased", "Reduced", "Improved", "Launched"]
_SUGGESTED_METRICS = ["by 20%", "for 500+ users", "$1M in revenue", "50% faster"]
_PASSIVE_REWRITES = ["Was responsible for → Led", "Were involved in → Contributed to"]
_MIN_DETAIL_CHARS = 30
_MAX_CONCISE_CHARS = 150
_METRIC_HINT_MIN_CHARS = 20


@dataclass(slots=True)
class BulletAnalysis:
    has_action_verb: bool
    weak_opener: str | None
    has_metric: bool
    has_cliche: bool
    length: int
    word_count: int
    has_passive_voice: bool


def _weak_opener(lowered: str) -> str | None:
    for phrase in WEAK_VERBS:
        if re.match(rf"{re.escape(phrase)}\b", lowered):
            return phrase
    return None


def analyze_bullet(text: str) -> BulletAnalysis:
    trimmed = (text or "").strip()
    lowered = trimmed.lower()
    words = trimmed.split()
    return BulletAnalysis(
        has_action_verb=bool(words) and first_word(words[0]) in ACTION_VERBS,
        weak_opener=_weak_opener(lowered),
        has_metric=bool(_METRIC_RE.search(trimmed)),
        has_cliche=any(cliche in lowered for cliche in CLICHES),
        length=len(trimmed),
        word_count=len(words),
        has_passive_voice=any(marker in lowered for marker in _PASSIVE_MARKERS),
    )


def generate_bullet_tips(text: str) -> list[BulletTip]:
    """Writing tips for a single experience bullet, most important first."""
    if not (text or "").strip():
        return [BulletTip(id="empty", type="info", message="Start typing to get writing tips", priority=5)]

    analysis = analyze_bullet(text)
    tips: list[BulletTip] = []

    if analysis.has_action_verb:
        tips.append(BulletTip(id="action-verb", type="success", message="Great! Starts with an action verb", priority=5))
    elif analysis.word_count > 0:
        message = "Start with a strong action verb"
        if analysis.weak_opener:
            message = f'Replace "{analysis.weak_opener}" with a strong action verb'
        tips.append(
            BulletTip(
                id="action-verb",
                type="warning",
                message=message,
                suggestions=list(_SUGGESTED_VERBS),
                priority=1,
            )
        )

    if analysis.has_metric:
        tips.append(
            BulletTip(id="metric", type="success", message="Excellent! Includes quantifiable results", priority=5)
        )
    elif analysis.length > _METRIC_HINT_MIN_CHARS:
        tips.append(
            BulletTip(
                id="metric",
                type="warning",
                message="Add a metric to show impact",
                suggestions=list(_SUGGESTED_METRICS),
                priority=1,
            )
        )

    if analysis.length < _MIN_DETAIL_CHARS:
        tips.append(BulletTip(id="length", type="info", message="Add more detail about your impact", priority=2))
    elif analysis.length > _MAX_CONCISE_CHARS:
        tips.append(
            BulletTip(id="length", type="warning", message="Keep it concise - aim for 1-2 lines", priority=2)
        )
    else:
        tips.append(BulletTip(id="length", type="success", message="Perfect length!", priority=5))

    if analysis.has_cliche:
        tips.append(BulletTip(id="cliche", type="warning", message="Avoid clichés - be specific instead", priority=3))

    if analysis.has_passive_voice:
        tips.append(
            BulletTip(
                id="passive",
                type="info",
                message="Use active voice for stronger impact",
                suggestions=list(_PASSIVE_REWRITES),
                priority=4,
            )
        )

    return sorted(tips, key=lambda tip: tip.priority)
