from __future__ import annotations

import re

from ats_analyzer.schemas.ats import CategoryResult, Issue

MAX_SCORE = 20
_SAFE_CHARS_POINTS = 10
_SAFE_SPACING_POINTS = 10

# Bullet glyphs pasted from word processors that many parsers drop or mangle.
_NON_STANDARD_BULLETS_RE = re.compile(r"[\u2022\u2023\u25e6\u2043\u2219]")
# Four or more whitespace characters usually mean manual column alignment.
# Also fires on legitimately spaced prose.
_ALIGNMENT_GAP_RE = re.compile(r"\s{4,}")


def analyze_parsing_safety(resume_text: str) -> CategoryResult:
    """Score the serialized resume for characters and spacing that confuse ATS parsers."""
    score = 0
    issues: list[Issue] = []

    if _NON_STANDARD_BULLETS_RE.search(resume_text):
        issues.append(
            Issue(
                id="parse-chars",
                type="warning",
                message="Non-standard characters detected.",
                suggestion='Avoid using fancy bullet points or symbols. Use standard "-" or "*".',
            )
        )
    else:
        score += _SAFE_CHARS_POINTS
        issues.append(Issue(id="parse-chars-ok", type="success", message="Text is parser-friendly."))

    if _ALIGNMENT_GAP_RE.search(resume_text):
        issues.append(
            Issue(
                id="parse-spacing",
                type="warning",
                message="Large gaps detected.",
                suggestion="Avoid using multiple spaces or tabs to align text. It breaks ATS parsing.",
            )
        )
    else:
        score += _SAFE_SPACING_POINTS

    return CategoryResult(score=score, max_score=MAX_SCORE, issues=issues)
