"""Global exception handlers for the FastAPI application.

Every error leaves the API in the same envelope as successful responses use,
minus ``data``::

    {"message_code": "...", "message": "...", "details": {...}}
"""

import traceback
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..messages import MessageCode, get_default_message
from src.utils.logger import get_logger

logger = get_logger(__name__)

HTTP_STATUS_MESSAGE_CODES = {
    status.HTTP_401_UNAUTHORIZED: MessageCode.UNAUTHORIZED,
    status.HTTP_403_FORBIDDEN: MessageCode.FORBIDDEN,
    status.HTTP_404_NOT_FOUND: MessageCode.RESOURCE_NOT_FOUND,
    status.HTTP_409_CONFLICT: MessageCode.CONFLICT,
}


class WelfareChainException(Exception):
    """Domain error carrying a message code, HTTP status and structured details."""

    def __init__(
        self,
        message_code: MessageCode,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict | None = None,
        headers: dict | None = None,
    ):
        self.message_code = message_code
        self.status_code = status_code
        self.message: str = get_default_message(message_code)
        self.details = details or {}
        self.headers = headers or {}
        super().__init__(self.message)

    def to_response_dict(self) -> dict:
        return {
            "message_code": self.message_code,
            "message": self.message,
            "details": self.details,
        }


def error_response(
    status_code: int,
    message_code: MessageCode,
    message: str | None = None,
    details: dict[str, Any] | None = None,
    headers: dict | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "message_code": message_code,
            "message": message or get_default_message(message_code),
            "details": details or {},
        },
        headers=headers,
    )


def _validation_errors(exc: RequestValidationError | ValidationError) -> list:
    # ctx may hold the raw exception that failed a validator
    return jsonable_encoder(
        [{k: v for k, v in error.items() if k != "ctx"} for error in exc.errors()]
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(WelfareChainException)
    async def welfarechain_exception_handler(
        request: Request, exc: WelfareChainException
    ) -> JSONResponse:
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            f"WelfareChain exception: {exc.message_code.value}",
            path=request.url.path,
            method=request.method,
            status_code=exc.status_code,
            details=exc.details,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_response_dict(),
            headers=exc.headers,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        logger.warning(
            f"HTTP exception {exc.status_code}: {exc.detail}",
            path=request.url.path,
            method=request.method,
        )
        return error_response(
            exc.status_code,
            HTTP_STATUS_MESSAGE_CODES.get(exc.status_code, MessageCode.BAD_REQUEST),
            message=str(exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning(
            "Request validation failed", path=request.url.path, method=request.method
        )
        return error_response(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            MessageCode.INVALID_INPUT,
            details={
                "description": "Request validation failed",
                "validation_errors": _validation_errors(exc),
            },
        )

    @app.exception_handler(ValidationError)
    async def model_validation_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        logger.warning(
            "Model validation failed", path=request.url.path, method=request.method
        )
        return error_response(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            MessageCode.VALIDATION_ERROR,
            details={"validation_errors": _validation_errors(exc)},
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(
        request: Request, exc: SQLAlchemyError
    ) -> JSONResponse:
        logger.error(
            f"Database error: {exc}",
            path=request.url.path,
            method=request.method,
            exception_type=type(exc).__name__,
        )
        # Unique constraints back the transaction hash checks under races
        if isinstance(exc, IntegrityError):
            return error_response(
                status.HTTP_409_CONFLICT,
                MessageCode.CONFLICT,
                message="Data integrity constraint violated",
                details={"database_error": "Constraint violation"},
            )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            MessageCode.INTERNAL_ERROR,
            message="Database error occurred",
            details={"database_error": "Internal database error"},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.error(
            f"Unhandled exception: {exc}",
            path=request.url.path,
            method=request.method,
            exception_type=type(exc).__name__,
            traceback=traceback.format_exc(),
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            MessageCode.INTERNAL_ERROR,
            details={"error_type": type(exc).__name__},
        )
