from __future__ import annotations

from ats_analyzer.schemas.ats import CategoryResult, Issue
from ats_analyzer.schemas.resume import ResumeSnapshot

MAX_SCORE = 20
_EXPERIENCE_POINTS = 8
_EDUCATION_POINTS = 6
_SKILLS_POINTS = 6


def analyze_structure(resume: ResumeSnapshot) -> CategoryResult:
    score = 0
    issues: list[Issue] = []

    has_experience = len(resume.work_experience) > 0
    has_education = len(resume.education) > 0
    has_skills = len(resume.skills) > 0

    if has_experience:
        score += _EXPERIENCE_POINTS
    else:
        issues.append(Issue(id="s-exp-missing", type="critical", message="Missing Work Experience section."))

    if has_education:
        score += _EDUCATION_POINTS
    else:
        issues.append(Issue(id="s-edu-missing", type="warning", message="Missing Education section."))

    if has_skills:
        score += _SKILLS_POINTS
    else:
        issues.append(Issue(id="s-skills-missing", type="warning", message="Missing Skills section."))

    if has_experience and has_education and has_skills:
        issues.append(Issue(id="s-ok", type="success", message="All key sections present."))

    return CategoryResult(score=score, max_score=MAX_SCORE, issues=issues)
