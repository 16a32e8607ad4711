from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

IssueType = Literal["critical", "warning", "success"]
DensityStatus = Literal["low", "optimal", "high"]
TipType = Literal["success", "warning", "info"]
Importance = Literal["high", "medium"]
ResumeSection = Literal["skills", "experience", "summary", "education"]


class Issue(BaseModel):
    id: str
    type: IssueType
    message: str
    suggestion: str | None = None


class CategoryResult(BaseModel):
    score: int
    max_score: int = Field(gt=0)
    issues: list[Issue] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate_score_range(self) -> "CategoryResult":
        if self.score < 0 or self.score > self.max_score:
            raise ValueError(f"score must be between 0 and {self.max_score}, got {self.score}")
        return self


class KeywordDensityEntry(BaseModel):
    keyword: str
    count: int = Field(ge=0)
    density: float = Field(ge=0.0)
    status: DensityStatus


class ATSBreakdown(BaseModel):
    contact: CategoryResult
    structure: CategoryResult
    content: CategoryResult
    skills: CategoryResult
    parsing_safety: CategoryResult
    job_match: CategoryResult | None = None


class ATSResult(BaseModel):
    total_score: int = Field(ge=0, le=100)
    breakdown: ATSBreakdown
    issues: list[Issue] = Field(default_factory=list)
    keyword_density: list[KeywordDensityEntry] | None = None


class BulletTip(BaseModel):
    id: str
    type: TipType
    message: str
    suggestions: list[str] | None = None
    priority: int = Field(ge=1, le=5)


class KeywordMatch(BaseModel):
    keyword: str
    found_in: list[ResumeSection]
    importance: Importance


class MissingKeyword(BaseModel):
    keyword: str
    importance: Importance
    suggested_section: str
    tip: str


class KeywordGapResult(BaseModel):
    match_percentage: int = Field(ge=0, le=100)
    keywords_found: list[KeywordMatch] = Field(default_factory=list)
    keywords_missing: list[MissingKeyword] = Field(default_factory=list)
    total_keywords: int = Field(ge=0)
    summary: str
