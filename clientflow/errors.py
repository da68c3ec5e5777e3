# clientflow/errors.py
"""
Error types raised by the handlers and the JSON mapping the API returns for them.

Every failure is reported as {"error": "<message>"}; only a missing record
gets a 404, everything else is a 500.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

logger = logging.getLogger(__name__)


class ClientFlowError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ClientFlowError):
    status_code = 404


def db_error_message(exc: SQLAlchemyError) -> str:
    # Surface the driver's own text, e.g. "NOT NULL constraint failed: clients.name"
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ClientFlowError)
    async def handle_clientflow_error(request: Request, exc: ClientFlowError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(SQLAlchemyError)
    async def handle_db_error(request: Request, exc: SQLAlchemyError):
        message = db_error_message(exc)
        logger.error("%s %s failed: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=500, content={"error": message})

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        message = _validation_message(exc)
        logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=500, content={"error": message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception("%s %s crashed", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": str(exc)})
