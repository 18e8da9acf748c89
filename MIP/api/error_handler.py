from __future__ import annotations

from datetime import datetime, timezone

from fastapi import Request
from fastapi.responses import JSONResponse

from packages.mip_core.errors import MIPBaseError
from packages.mip_core.logging import get_logger

logger = get_logger("MIP.error_handler")


async def mip_exception_handler(request: Request, exc: MIPBaseError) -> JSONResponse:
    """Turn an MIPBaseError into the standard error response."""

    # 5xx errors carry the traceback in the log
    if exc.status_code >= 500:
        logger.exception(f"Unhandled MIPBaseError: {exc.message}", exc_info=exc)
    else:
        logger.warning(f"MIPBaseError ({exc.code}) on {request.method} {request.url.path}: {exc.message}")

    content = {
        "error": {
            "code": exc.code,
            "message": exc.message,
            "detail": exc.details,
        },
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content=content, headers=headers)
