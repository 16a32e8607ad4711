from __future__ import annotations

from ats_analyzer.core.config import get_scoring_value
from ats_analyzer.lexicon import SKILL_CLUSTERS, SOFT_SKILLS
from ats_analyzer.schemas.ats import CategoryResult, Issue
from ats_analyzer.schemas.resume import ResumeSnapshot

MAX_SCORE = 20
_BALANCED_POINTS = 20
_SOFT_HEAVY_POINTS = 10


def _cluster_issues_and_bonus(skill_names: set[str]) -> tuple[list[Issue], int]:
    # The suggestion cap throttles what gets displayed, not what gets scored.
    max_suggestions = int(get_scoring_value("ats.skills.max_cluster_suggestions", 2))
    max_listed = int(get_scoring_value("ats.skills.max_missing_listed", 3))
    cluster_bonus = int(get_scoring_value("ats.skills.cluster_bonus", 5))

    issues: list[Issue] = []
    bonus = 0
    for trigger, related in SKILL_CLUSTERS.items():
        if trigger not in skill_names:
            continue
        missing = [skill for skill in related if skill not in skill_names]
        if not missing:
            bonus += cluster_bonus
        elif len(missing) < len(related) and len(issues) < max_suggestions:
            issues.append(
                Issue(
                    id=f"sem-{trigger}",
                    type="warning",
                    message=f"Enhance your {trigger} profile.",
                    suggestion=f"Consider adding related skills: {', '.join(missing[:max_listed])}.",
                )
            )
    return issues, bonus


def analyze_skills(resume: ResumeSnapshot) -> CategoryResult:
    skills = resume.skills
    if not skills:
        return CategoryResult(score=0, max_score=MAX_SCORE, issues=[])

    score = 0
    issues: list[Issue] = []
    lowered_names = [skill.name.strip().lower() for skill in skills]

    soft_ratio_limit = float(get_scoring_value("ats.skills.soft_skill_ratio_limit", 0.4))
    soft_count = sum(1 for name in lowered_names if name in SOFT_SKILLS)
    if soft_count / len(skills) > soft_ratio_limit:
        score += _SOFT_HEAVY_POINTS
        issues.append(
            Issue(
                id="skl-soft-high",
                type="warning",
                message="Too many soft skills.",
                suggestion="Focus on hard/technical skills. Soft skills are better demonstrated in bullet points.",
            )
        )
    else:
        score += _BALANCED_POINTS
        issues.append(Issue(id="skl-ok", type="success", message="Good balance of hard skills."))

    unique_names = set(lowered_names)
    if len(unique_names) < len(skills):
        issues.append(
            Issue(
                id="skl-dup",
                type="warning",
                message="Duplicate skills detected.",
                suggestion="Remove duplicate skill entries.",
            )
        )

    cluster_issues, bonus = _cluster_issues_and_bonus(unique_names)
    issues.extend(cluster_issues)

    return CategoryResult(score=min(score + bonus, MAX_SCORE), max_score=MAX_SCORE, issues=issues)
