from fastapi import APIRouter

from ats_analyzer.core.config import get_scoring_config

router = APIRouter()


@router.get("/health", summary="Health Check", description="Report service status and whether scoring weights loaded.")
async def health_check():
    config = get_scoring_config()
    return {"status": "healthy", "scoring_config_loaded": bool(config.get("ats"))}
