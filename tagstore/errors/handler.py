"""Exception handlers that turn raised errors into the JSON response envelope"""

import logging
import traceback
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from tagstore.errors.base import ApplicationError, field_errors
from tagstore.errors.common import MalformedRequestError
from tagstore.schemas.base import ErrorSchema, ResponseSchema

logger = logging.getLogger(__name__)


def error_response(
    http_code: int, error_code: int, error: str, details: list | None = None
) -> JSONResponse:
    envelope = ResponseSchema[ErrorSchema](
        code=http_code,
        status=HTTPStatus(http_code).phrase,
        data=ErrorSchema(error_code=error_code, error=error, details=details),
    )
    return JSONResponse(
        status_code=http_code,
        content=envelope.model_dump(mode="json", exclude_none=True),
    )


def application_exception_handler(
    request: Request, exc: ApplicationError
) -> JSONResponse:
    logger.error(
        "%s %s: [%s] %s", request.method, request.url.path, exc.error_code, exc.error
    )
    # Only print full traceback when in debug logging
    if logger.isEnabledFor(logging.DEBUG):
        traceback.print_exception(exc)
    details = exc.details if isinstance(exc.details, list) else None
    return error_response(exc.http_code, exc.error_code, exc.error, details)


def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # malformed json, non-object body, non-integer path id
    return application_exception_handler(
        request, MalformedRequestError(field_errors(exc.errors()))
    )


def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("%s %s: %s", request.method, request.url.path, exc)
    if logger.isEnabledFor(logging.DEBUG):
        traceback.print_exception(exc)
    return error_response(500, 1500, exc._message())


def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "%s %s: unhandled error", request.method, request.url.path, exc_info=exc
    )
    return error_response(500, 1500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApplicationError, application_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unexpected_exception_handler)
