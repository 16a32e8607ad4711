from __future__ import annotations

from pydantic import BaseModel, Field

from ats_analyzer.core.config import settings

from .ats import BulletTip
from .resume import ResumeSnapshot


class AnalyzeRequest(BaseModel):
    resume: ResumeSnapshot
    job_description: str | None = Field(default=None, max_length=settings.max_job_description_chars)


class KeywordGapRequest(BaseModel):
    resume: ResumeSnapshot
    job_description: str = Field(default="", max_length=settings.max_job_description_chars)


class BulletTipsRequest(BaseModel):
    text: str = Field(default="", max_length=2000)


class BulletTipsResponse(BaseModel):
    tips: list[BulletTip]
