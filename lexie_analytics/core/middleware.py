"""
Error handling middleware

JSON error bodies for ``/api`` routes, an HTML error page for the report
pages.
"""
import logging

from fastapi import Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from lexie_analytics.core.errors import APIError
from lexie_analytics.reports import render_error

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def _is_api_request(request: Request) -> bool:
    return request.url.path.startswith(API_PREFIX)


def _html_error(request: Request, message: str, status_code: int) -> HTMLResponse:
    if request.url.path.rstrip("/") == "/feedback":
        heading, back_href, back_label = "Error retrieving feedback", "/", "Back to Dashboard"
    else:
        heading, back_href, back_label = "Error loading dashboard", "/feedback", "View Feedback"
    return HTMLResponse(
        render_error(heading, message, back_href=back_href, back_label=back_label),
        status_code=status_code,
    )


async def api_error_handler(request: Request, exc: APIError) -> Response:
    """
    Handle our custom exceptions
    """
    logger.error(
        f"API Error: {exc.error_code}: {exc.message}",
        extra={"path": request.url.path, "status_code": exc.status_code}
    )
    if not _is_api_request(request):
        return _html_error(request, exc.message, exc.status_code)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def error_handler(request: Request, exc: Exception) -> Response:
    """
    Handle unexpected errors
    """
    logger.exception(
        "Unexpected Error",
        extra={"path": request.url.path, "error_type": type(exc).__name__}
    )
    if not _is_api_request(request):
        return _html_error(request, str(exc), 500)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "message": str(exc)}
    )


def setup_error_handlers(app):
    """
    Configure error handlers for FastAPI app
    """
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, error_handler)
