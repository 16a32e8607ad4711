from __future__ import annotations

from collections import Counter

from ats_analyzer.core.config import get_scoring_value
from ats_analyzer.schemas.ats import CategoryResult, Issue

from .keywords import top_keywords
from .utils import round_half_up

MAX_SCORE = 100


def analyze_job_match(jd_keywords: Counter[str], resume_text: str) -> CategoryResult:
    """Share of the most frequent job-description keywords found verbatim in the resume text."""
    limit = int(get_scoring_value("ats.job_match.top_keywords", 20))
    great_threshold = int(get_scoring_value("ats.job_match.great_threshold", 80))
    ok_threshold = int(get_scoring_value("ats.job_match.ok_threshold", 50))
    max_listed = int(get_scoring_value("ats.job_match.max_missing_listed", 5))

    keywords = top_keywords(jd_keywords, limit)
    if not keywords:
        return CategoryResult(
            score=0,
            max_score=MAX_SCORE,
            issues=[
                Issue(
                    id="jd-no-keywords",
                    type="warning",
                    message="No usable keywords found in the Job Description.",
                    suggestion="Paste the full job posting, including requirements and responsibilities.",
                )
            ],
        )

    lowered = resume_text.lower()
    missing = [keyword for keyword in keywords if keyword not in lowered]
    match_count = len(keywords) - len(missing)
    score = round_half_up(match_count / len(keywords) * 100)

    if score >= great_threshold:
        issue = Issue(id="jd-match-great", type="success", message="Excellent match with Job Description!")
    elif score >= ok_threshold:
        issue = Issue(
            id="jd-match-ok",
            type="warning",
            message="Moderate match with Job Description.",
            suggestion=f"Consider adding these keywords: {', '.join(missing[:max_listed])}",
        )
    else:
        issue = Issue(
            id="jd-match-poor",
            type="critical",
            message="Low match with Job Description.",
            suggestion=f"Missing critical keywords: {', '.join(missing[:max_listed])}",
        )

    return CategoryResult(score=score, max_score=MAX_SCORE, issues=[issue])
