"""
Pledge API Response Utilities
Payload shapes shared by the routes and the error handler
"""
from fastapi import Request
from fastapi.responses import JSONResponse

from .errors import PledgeError, Unauthorized
from .logging_config import api_logger
from .schemas.trigger import TriggerResponse, TriggerSummary


def trigger_success(summary: TriggerSummary) -> dict:
    """{"success": true, "summary": {...}}"""
    return TriggerResponse(success=True, summary=summary).to_payload()


def trigger_failure(message: str, status_code: int = 500) -> JSONResponse:
    """{"success": false, "error": "..."}"""
    return JSONResponse(
        status_code=status_code,
        content=TriggerResponse(success=False, error=message).to_payload(),
    )


def error_response(status_code: int, message: str) -> JSONResponse:
    """{"error": "..."} for the public pledge endpoints"""
    return JSONResponse(status_code=status_code, content={"error": message})


async def pledge_error_handler(request: Request, exc: PledgeError) -> JSONResponse:
    """Render service errors raised from routes or their dependencies."""
    if isinstance(exc, Unauthorized):
        api_logger.warning("Unauthorized request", path=request.url.path)
    else:
        api_logger.error(f"Request failed: {exc}", error=exc, path=request.url.path)
    return trigger_failure(str(exc), exc.status_code)
