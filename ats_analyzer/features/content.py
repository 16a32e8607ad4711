from __future__ import annotations

import re
from collections import Counter

from ats_analyzer.core.config import get_scoring_value
from ats_analyzer.lexicon import ACTION_VERBS, CLICHES
from ats_analyzer.schemas.ats import CategoryResult, Issue
from ats_analyzer.schemas.resume import ResumeSnapshot

from .serialization import collect_bullets
from .utils import first_word, round_half_up

MAX_SCORE = 40
_ACTION_VERB_POINTS = 15
_ACTION_VERB_PARTIAL_POINTS = 8
_METRIC_POINTS = 15
_METRIC_PARTIAL_POINTS = 8
_VARIETY_POINTS = 5
_CLICHE_FREE_POINTS = 5

_METRIC_RE = re.compile(r"\d+%|\$\d+|\d+k|\d+\+|\d+x", re.IGNORECASE)


def _score_action_verbs(start_words: list[str]) -> tuple[int, Issue]:
    great_ratio = float(get_scoring_value("ats.content.action_verb_great_ratio", 0.7))
    ok_ratio = float(get_scoring_value("ats.content.action_verb_ok_ratio", 0.4))

    verb_count = sum(1 for word in start_words if word in ACTION_VERBS)
    ratio = verb_count / len(start_words)

    if ratio >= great_ratio:
        return _ACTION_VERB_POINTS, Issue(id="cnt-verbs-great", type="success", message="Great use of action verbs!")
    if ratio >= ok_ratio:
        return _ACTION_VERB_PARTIAL_POINTS, Issue(
            id="cnt-verbs-ok",
            type="warning",
            message="Could use more action verbs.",
            suggestion=(
                f"Only {round_half_up(ratio * 100)}% of bullets start with action verbs. "
                f"Aim for {round_half_up(great_ratio * 100)}%+."
            ),
        )
    return 0, Issue(
        id="cnt-verbs-bad",
        type="critical",
        message="Weak bullet points.",
        suggestion='Start sentences with strong verbs like "Led", "Developed", "Created".',
    )


def _score_metrics(bullets: list[str]) -> tuple[int, Issue]:
    great_ratio = float(get_scoring_value("ats.content.metric_great_ratio", 0.3))

    metric_count = sum(1 for bullet in bullets if _METRIC_RE.search(bullet))
    ratio = metric_count / len(bullets)

    if ratio >= great_ratio:
        return _METRIC_POINTS, Issue(id="cnt-metrics-great", type="success", message="Good use of quantifiable results.")
    if metric_count > 0:
        return _METRIC_PARTIAL_POINTS, Issue(
            id="cnt-metrics-ok",
            type="warning",
            message="Add more metrics.",
            suggestion='Try to quantify your achievements (e.g., "Increased sales by 20%").',
        )
    return 0, Issue(
        id="cnt-metrics-bad",
        type="critical",
        message="No metrics found.",
        suggestion="ATS systems love numbers. Add percentages, dollar amounts, or counts.",
    )


def _repeated_start_words(start_words: list[str]) -> list[str]:
    limit = int(get_scoring_value("ats.content.repetition_limit", 2))
    counts = Counter(word for word in start_words if word)
    return [word for word, count in counts.items() if count > limit]


def _find_cliches(bullets: list[str]) -> list[str]:
    full_text = " ".join(bullets).lower()
    return [cliche for cliche in CLICHES if cliche in full_text]


def analyze_content(resume: ResumeSnapshot) -> CategoryResult:
    bullets = collect_bullets(resume)
    if not bullets:
        return CategoryResult(
            score=0,
            max_score=MAX_SCORE,
            issues=[Issue(id="cnt-empty", type="critical", message="No bullet points found in experience.")],
        )

    score = 0
    issues: list[Issue] = []
    start_words = [first_word(bullet) for bullet in bullets]

    points, issue = _score_action_verbs(start_words)
    score += points
    issues.append(issue)

    points, issue = _score_metrics(bullets)
    score += points
    issues.append(issue)

    repeated = _repeated_start_words(start_words)
    if repeated:
        issues.append(
            Issue(
                id="cnt-repetition",
                type="warning",
                message="Repetitive sentence starters.",
                suggestion=f'You start multiple bullets with: "{", ".join(repeated)}". Try varying your vocabulary.',
            )
        )
    else:
        score += _VARIETY_POINTS

    cliches = _find_cliches(bullets)
    if cliches:
        max_listed = int(get_scoring_value("ats.content.max_cliches_listed", 3))
        issues.append(
            Issue(
                id="cnt-cliche",
                type="warning",
                message="Avoid using clichés.",
                suggestion=f'Found: "{", ".join(cliches[:max_listed])}". Be specific instead.',
            )
        )
    else:
        score += _CLICHE_FREE_POINTS

    return CategoryResult(score=score, max_score=MAX_SCORE, issues=issues)
