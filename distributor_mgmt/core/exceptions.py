"""Application-level exceptions and FastAPI exception handlers."""

import logging
from enum import Enum

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

logger = logging.getLogger(__name__)

class ErrorKind(str, Enum):
    """Closed set of failure kinds the transport layer maps to status codes."""

    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        kind: ErrorKind = ErrorKind.INTERNAL_ERROR,
    ):
        self.message = message
        self.status_code = status_code
        self.kind = kind
        super().__init__(message)

    @property
    def code(self) -> str:
        return self.kind.value

class NotFoundError(AppException):
    def __init__(self, entity: str, entity_id: str | None = None):
        self.entity = entity
        self.entity_id = entity_id
        msg = f"{entity} not found" if not entity_id else f"{entity} '{entity_id}' not found"
        super().__init__(msg, status_code=404, kind=ErrorKind.NOT_FOUND)

class ConflictError(AppException):
    def __init__(self, message: str, entity: str | None = None, entity_id: str | None = None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(message, status_code=409, kind=ErrorKind.CONFLICT)

class ValidationError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=422, kind=ErrorKind.VALIDATION_ERROR)

# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _error_body(code: str, message: str, **extra: str | None) -> dict:
    error = {"code": code, "message": message}
    error.update({k: v for k, v in extra.items() if v is not None})
    return {"error": error}

def register_exception_handlers(app: FastAPI) -> None:
    """Attach all custom exception handlers to the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(
                exc.code,
                exc.message,
                entity=getattr(exc, "entity", None),
                id=getattr(exc, "entity_id", None),
            ),
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        logger.warning("Integrity violation on %s %s: %s", request.method, request.url.path, exc.orig)
        return JSONResponse(
            status_code=409,
            content=_error_body(ErrorKind.CONFLICT.value, "Request conflicts with stored data"),
        )

    @app.exception_handler(SQLAlchemyError)
    async def persistence_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error("Persistence failure on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content=_error_body(ErrorKind.PERSISTENCE_ERROR.value, "Storage operation failed"),
        )

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content=_error_body(ErrorKind.NOT_FOUND.value, "Resource not found"),
        )

    @app.exception_handler(500)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content=_error_body(ErrorKind.INTERNAL_ERROR.value, "An unexpected error occurred"),
        )
