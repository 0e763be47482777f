"""Error envelope handlers for FastAPI."""

from __future__ import annotations

import logging
from typing import Mapping

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from skill_api.schemas.skill import ErrorResponse


logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "invalid request"


class SkillAPIError(Exception):
    """Raised by route handlers to answer with `{"status": "error", "message": ...}`."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(message=message).model_dump())


async def skill_api_error_handler(request: Request, exc: SkillAPIError) -> JSONResponse:
    return _error_response(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail))


def register_exception_handlers(app: FastAPI, route_messages: Mapping[str, str]) -> None:
    """Register all exception handlers with the FastAPI app.

    `route_messages` maps endpoint function names to the fixed message returned when
    that route's request body or path fails validation.
    """

    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        endpoint = request.scope.get("endpoint")
        name = getattr(endpoint, "__name__", "")
        logger.warning("request validation failed endpoint=%s errors=%s", name or request.url.path, exc.errors())
        return _error_response(status.HTTP_400_BAD_REQUEST, route_messages.get(name, DEFAULT_ERROR_MESSAGE))

    app.add_exception_handler(SkillAPIError, skill_api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
