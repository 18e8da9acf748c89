from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from MIP.api.dependencies import get_config
from packages.mip_core.config import MIPConfig

router = APIRouter()


@router.get("/health")
async def health_check(config: MIPConfig = Depends(get_config)):
    """
    Server liveness check.
    Returns status, version, and current timestamp.
    """
    return {
        "status": "ok",
        "version": config.VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
