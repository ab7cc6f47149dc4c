"""Error Handlers - map roster errors to browser-friendly or JSON responses.

Invariants:
    - Not-found answers its status immediately; no view is rendered
    - Browsers (and any client not asking for JSON) get a short plain-text body,
      e.g. "User not found"
    - Clients sending Accept: application/json get the RosterError envelope
    - Unexpected failures answer 500 and never leak internal details

Design Decisions:
    - No RequestValidationError handler: every route parameter is an optional str,
      so malformed input reaches core/validation.py and is re-rendered as HTML
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.responses import Response

from roster.core.errors import RosterError, internal_error_response

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(RosterError, roster_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)


def wants_json(request: Request) -> bool:
    return "application/json" in request.headers.get("accept", "")


async def roster_error_handler(request: Request, exc: RosterError) -> Response:
    logger.error(
        f"RosterError: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    if wants_json(request):
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )
    return PlainTextResponse(exc.to_text(), status_code=exc.http_status)


async def unexpected_error_handler(request: Request, exc: Exception) -> Response:
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True, extra={"path": request.url.path},
    )
    if wants_json(request):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=internal_error_response(),
        )
    return PlainTextResponse(
        "Internal Server Error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
