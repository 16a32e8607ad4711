from .ats import (
    ATSBreakdown,
    ATSResult,
    BulletTip,
    CategoryResult,
    Issue,
    KeywordDensityEntry,
    KeywordGapResult,
    KeywordMatch,
    MissingKeyword,
)
from .resume import Education, PersonalInfo, Project, ResumeSnapshot, Skill, WorkExperience

__all__ = [
    "PersonalInfo",
    "WorkExperience",
    "Education",
    "Skill",
    "Project",
    "ResumeSnapshot",
    "Issue",
    "CategoryResult",
    "KeywordDensityEntry",
    "ATSBreakdown",
    "ATSResult",
    "BulletTip",
    "KeywordMatch",
    "MissingKeyword",
    "KeywordGapResult",
]
