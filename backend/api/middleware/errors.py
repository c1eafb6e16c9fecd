"""
Error translation.

Maps the exception taxonomy in shared.exceptions onto HTTP responses.
Server-side failure details are only returned when debug is on.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import WordCaptureError, status_for

from .upload import UploadRejectedError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again later."


def register_exception_handlers(app: FastAPI, debug: bool = False) -> None:
    """Install the JSON error handlers on an application."""

    @app.exception_handler(UploadRejectedError)
    async def upload_rejected_handler(request: Request, exc: UploadRejectedError) -> JSONResponse:
        logger.info(f"Upload rejected on {request.url.path}: {exc.message}")
        return JSONResponse(status_code=400, content={"success": False, "error": exc.message})

    @app.exception_handler(WordCaptureError)
    async def app_error_handler(request: Request, exc: WordCaptureError) -> JSONResponse:
        status_code = status_for(exc)
        message = exc.message
        if status_code >= 500:
            logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
            if status_code == 500 and not debug:
                message = GENERIC_ERROR_MESSAGE
        else:
            logger.info(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")

        content = {"success": False, "message": message, "error": exc.code}
        if debug:
            content["details"] = exc.details
        return JSONResponse(status_code=status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        content = {"success": False, "message": "Invalid request", "error": "VALIDATION_ERROR"}
        if debug:
            content["details"] = jsonable_errors(exc)
        return JSONResponse(status_code=400, content=content)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            return JSONResponse(
                status_code=404,
                content={"error": "Route not found", "path": request.url.path},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        content = {"success": False, "message": GENERIC_ERROR_MESSAGE}
        if debug:
            content["details"] = {"type": exc.__class__.__name__, "error": str(exc)}
        return JSONResponse(status_code=500, content=content)


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Validation errors reduced to JSON-safe fields."""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]
