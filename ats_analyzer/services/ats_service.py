from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from ats_analyzer.core.config import get_scoring_value
from ats_analyzer.features import (
    analyze_contact,
    analyze_content,
    analyze_job_match,
    analyze_keyword_density,
    analyze_keyword_gap,
    analyze_parsing_safety,
    analyze_skills,
    analyze_structure,
    extract_keywords,
    serialize_resume,
)
from ats_analyzer.features.utils import clamp_int, round_half_up
from ats_analyzer.schemas.ats import ATSBreakdown, ATSResult, CategoryResult, Issue, KeywordGapResult
from ats_analyzer.schemas.resume import ResumeSnapshot

logger = logging.getLogger(__name__)

CATEGORY_ORDER: tuple[str, ...] = ("contact", "structure", "content", "skills", "parsing_safety", "job_match")

_DEFAULT_WEIGHTS_WITH_JD: dict[str, float] = {
    "contact": 5,
    "structure": 10,
    "content": 25,
    "skills": 20,
    "parsing_safety": 10,
    "job_match": 30,
}
_DEFAULT_WEIGHTS_WITHOUT_JD: dict[str, float] = {
    "contact": 15,
    "structure": 15,
    "content": 35,
    "skills": 25,
    "parsing_safety": 10,
}


class InvalidInputError(ValueError):
    def __init__(self, message: str, *, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


def category_weights(has_job_description: bool) -> dict[str, float]:
    if has_job_description:
        table, defaults = "with_job_description", _DEFAULT_WEIGHTS_WITH_JD
    else:
        table, defaults = "without_job_description", _DEFAULT_WEIGHTS_WITHOUT_JD
    return {
        name: float(get_scoring_value(f"ats.weights.{table}.{name}", default))
        for name, default in defaults.items()
    }


def calculate_total_score(categories: Mapping[str, CategoryResult | None]) -> int:
    """Weighted 0-100 total; the job-description weight table applies when job_match is present."""
    has_job_match = categories.get("job_match") is not None
    total = 0.0
    for name, weight in category_weights(has_job_match).items():
        category = categories.get(name)
        if category is None:
            raise InvalidInputError(f"Missing category result '{name}'.")
        total += category.score / category.max_score * weight
    return clamp_int(round_half_up(total), 0, 100)


def coerce_resume(resume: ResumeSnapshot | Mapping[str, Any]) -> ResumeSnapshot:
    if isinstance(resume, ResumeSnapshot):
        return resume
    if not isinstance(resume, Mapping):
        raise InvalidInputError(
            f"Resume must be a ResumeSnapshot or a mapping, got {type(resume).__name__}."
        )
    try:
        return ResumeSnapshot.model_validate(dict(resume))
    except ValidationError as exc:
        raise InvalidInputError(
            "Resume data does not match the expected shape.",
            errors=exc.errors(include_url=False, include_context=False, include_input=False),
        ) from exc


def _normalize_job_description(job_description: Any) -> str | None:
    if job_description is None:
        return None
    if not isinstance(job_description, str):
        raise InvalidInputError(
            f"Job description must be a string, got {type(job_description).__name__}."
        )
    return job_description if job_description.strip() else None


def analyze(
    resume: ResumeSnapshot | Mapping[str, Any],
    job_description: str | None = None,
) -> ATSResult:
    """Run every category analyzer and combine them into one ATS compatibility result.

    Job-match and keyword-density analysis only run for a non-blank job
    description; otherwise both are left unset in the result.
    """
    snapshot = coerce_resume(resume)
    jd_text = _normalize_job_description(job_description)
    resume_text = serialize_resume(snapshot)

    categories: dict[str, CategoryResult | None] = {
        "contact": analyze_contact(snapshot),
        "structure": analyze_structure(snapshot),
        "content": analyze_content(snapshot),
        "skills": analyze_skills(snapshot),
        "parsing_safety": analyze_parsing_safety(resume_text),
        "job_match": None,
    }

    keyword_density = None
    if jd_text is not None:
        jd_keywords = extract_keywords(jd_text)
        categories["job_match"] = analyze_job_match(jd_keywords, resume_text)
        keyword_density = analyze_keyword_density(jd_keywords, resume_text)

    issues: list[Issue] = []
    for name in CATEGORY_ORDER:
        category = categories[name]
        if category is None:
            continue
        logger.debug("ats_category name=%s score=%s max_score=%s", name, category.score, category.max_score)
        issues.extend(category.issues)

    total_score = calculate_total_score(categories)

    logger.info(
        "ats_analysis_complete total_score=%s has_job_description=%s issues=%s critical=%s",
        total_score,
        jd_text is not None,
        len(issues),
        sum(1 for issue in issues if issue.type == "critical"),
    )

    return ATSResult(
        total_score=total_score,
        breakdown=ATSBreakdown(**categories),
        issues=issues,
        keyword_density=keyword_density,
    )


def run_keyword_gap(
    resume: ResumeSnapshot | Mapping[str, Any],
    job_description: str | None,
) -> KeywordGapResult:
    snapshot = coerce_resume(resume)
    jd_text = _normalize_job_description(job_description) or ""
    result = analyze_keyword_gap(snapshot, jd_text)
    logger.info(
        "ats_keyword_gap_complete match_percentage=%s total_keywords=%s missing=%s",
        result.match_percentage,
        result.total_keywords,
        len(result.keywords_missing),
    )
    return result
