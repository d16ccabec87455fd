"""Domain errors and their HTTP error envelopes."""

from typing import Any, Dict, Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError, StatementError
from starlette import status

log = structlog.get_logger(__name__)


class HealthUnitsError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "INTERNAL_ERROR"
    default_message = "Unexpected error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(HealthUnitsError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHENTICATED"
    default_message = "Please login"


class Unauthorized(HealthUnitsError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"
    default_message = "You do not have permission to do this"


class StoreUnavailable(HealthUnitsError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    code = "STORE_UNAVAILABLE"
    default_message = "Database not available"


class CreateFailed(HealthUnitsError):
    code = "CREATE_FAILED"
    default_message = "Failed to create health unit"


class UpdateFailed(HealthUnitsError):
    code = "UPDATE_FAILED"
    default_message = "Failed to update health unit"


def error_response(
    status_code: int,
    code: str,
    message: str,
    details: Optional[Any] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    content: Dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        content["details"] = jsonable_encoder(details)
    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def handle_health_units_error(request: Request, exc: HealthUnitsError) -> JSONResponse:
    log_method = log.error if exc.status_code >= 500 else log.warning
    log_method(
        "request_failed",
        path=request.url.path,
        code=exc.code,
        status_code=exc.status_code,
        error_message=exc.message,
    )
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthenticated) else None
    return error_response(exc.status_code, exc.code, exc.message, headers=headers)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    log.info("request_validation_failed", path=request.url.path, errors=len(exc.errors()))
    return error_response(
        422,
        "VALIDATION_ERROR",
        "Invalid input",
        details=exc.errors(),
    )


async def handle_operational_error(request: Request, exc: OperationalError) -> JSONResponse:
    log.error("database_operation_failed", path=request.url.path, error=str(exc.orig))
    return error_response(
        StoreUnavailable.status_code, StoreUnavailable.code, StoreUnavailable.default_message
    )


async def handle_database_error(request: Request, exc: StatementError) -> JSONResponse:
    log.error("database_statement_failed", path=request.url.path, error=str(exc.orig))
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "DATABASE_ERROR", "Database operation failed"
    )


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(HealthUnitsError, handle_health_units_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(OperationalError, handle_operational_error)
    app.add_exception_handler(StatementError, handle_database_error)
