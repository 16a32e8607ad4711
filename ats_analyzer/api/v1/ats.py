from fastapi import APIRouter, Header, Request

from ats_analyzer.core.rate_limit import rate_limit
from ats_analyzer.core.security import check_api_key
from ats_analyzer.features import generate_bullet_tips
from ats_analyzer.schemas.api import AnalyzeRequest, BulletTipsRequest, BulletTipsResponse, KeywordGapRequest
from ats_analyzer.schemas.ats import ATSResult, KeywordGapResult
from ats_analyzer.services.ats_service import analyze, run_keyword_gap

router = APIRouter()


@router.post("/ats/analyze", response_model=ATSResult, response_model_exclude_none=True)
@rate_limit()
async def analyze_resume(
    request: Request,
    payload: AnalyzeRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    return analyze(payload.resume, payload.job_description)


@router.post("/ats/bullet-tips", response_model=BulletTipsResponse, response_model_exclude_none=True)
@rate_limit()
async def bullet_tips(
    request: Request,
    payload: BulletTipsRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    return BulletTipsResponse(tips=generate_bullet_tips(payload.text))


@router.post("/ats/keyword-gap", response_model=KeywordGapResult)
@rate_limit()
async def keyword_gap(
    request: Request,
    payload: KeywordGapRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    return run_keyword_gap(payload.resume, payload.job_description)
