"""
Translation of application errors to HTTP responses

Each error kind maps to exactly one status code.
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from typing import List
import logging

from inventory_service.core.errors import (
    AppError,
    DependentResourceNotFound,
    FailureClass,
    InvalidPayload,
    ResourceAlreadyExists,
    ResourceNotFound,
)
from inventory_service.core.messages import render

logger = logging.getLogger(__name__)


class InvalidIdentifier(AppError):
    """A path id that is not an integer"""


STATUS_BY_FAILURE_CLASS = {
    FailureClass.UNPROCESSABLE: 422,
    FailureClass.BAD_REQUEST: 400,
}

STATUS_BY_ERROR = {
    InvalidIdentifier: 400,
    ResourceNotFound: 404,
    DependentResourceNotFound: 409,
    ResourceAlreadyExists: 409,
}

ERROR_CODES = {
    400: "bad_request",
    404: "not_found",
    409: "conflict",
    422: "unprocessable_entity",
    500: "internal_server_error",
}


def status_for(exc: AppError) -> int:
    """Status code of an application error"""
    if isinstance(exc, InvalidPayload):
        return STATUS_BY_FAILURE_CLASS[exc.failure_class]
    return STATUS_BY_ERROR.get(type(exc), 500)


def error_response(status_code: int, messages: List[str]) -> JSONResponse:
    """Error envelope: {"code": ..., "message": [...]}"""
    return JSONResponse(
        status_code=status_code,
        content={
            "code": ERROR_CODES.get(status_code, "error"),
            "message": messages
        }
    )


def register_exception_handlers(app: FastAPI):
    """Install the application error handlers"""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        status_code = status_for(exc)

        if isinstance(exc, InvalidPayload):
            logger.info(f"Rejected payload on {request.method} {request.url.path}: {exc.messages}")
            return error_response(status_code, exc.messages)

        logger.warning(f"{exc.__class__.__name__} on {request.method} {request.url.path}: {exc.message}")
        return error_response(status_code, [exc.message])

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler"""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)

        return error_response(
            500,
            [render("request.internal_error")]
        )
