"""
Response envelope and exception handlers.
Successful responses carry {"data": ...}; failures carry {"error": "<message>"}.
"""

import json
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.logging_config import get_logger

logger = get_logger(__name__)


class PrettyJSONResponse(JSONResponse):
    """JSON response rendered with indentation."""

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=4).encode("utf-8")


def error_response(status_code: int, message: str) -> PrettyJSONResponse:
    return PrettyJSONResponse(status_code=status_code, content={"error": message})


def register_error_handling(app: FastAPI) -> None:
    """Install handlers that turn every failure into the error envelope."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        return error_response(400, "Request validation failed")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error("Unhandled API exception", path=request.url.path, error=str(exc))
        return error_response(500, str(exc) or "Unexpected internal error")
