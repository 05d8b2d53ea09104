from fastapi import APIRouter

from youth_gateway.core.config import settings
from youth_gateway.tools.registry import TOOLS

router = APIRouter(tags=["[HEALTH] Health Check"])

@router.get("/health")
async def health():
    return {
        "status": "ok",
        "service": "youth-gateway",
        "tools": len(TOOLS),
        "missing_api_keys": settings.missing_api_keys(),
    }
