"""Error taxonomy shared by services and routes.

Every domain error is a FastAPI ``HTTPException`` so services can raise it
directly; ``register_exception_handlers`` renders them as
``{"message": ..., "errors": [...]}`` bodies.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

LOGGER = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"


class InvalidCredentialFormat(ValueError):
    """Stored password hash cannot be parsed."""


class MarketError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = GENERIC_ERROR_MESSAGE

    def __init__(
        self,
        message: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(status_code=type(self).status_code, detail=message or self.default_message, headers=headers)
        self.errors = errors


class ValidationError(MarketError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class AuthenticationError(MarketError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class AuthorizationError(MarketError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFoundError(MarketError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(MarketError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Already exists"


class InternalError(MarketError):
    pass


def field_errors(errors: Iterable[Dict[str, Any]], skip: int = 0) -> List[Dict[str, str]]:
    """Flatten pydantic error dicts into ``{"field", "message"}`` pairs."""
    out = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())[skip:]]
        out.append({"field": ".".join(loc), "message": err.get("msg", "invalid value")})
    return out


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(MarketError)
    async def handle_market_error(request: Request, exc: MarketError) -> JSONResponse:
        body: Dict[str, Any] = {"message": exc.detail}
        if exc.errors:
            body["errors"] = exc.errors
        return JSONResponse(status_code=exc.status_code, content=body, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        # drop the "body"/"query"/"path" location prefix
        errors = field_errors(exc.errors(), skip=1)
        LOGGER.info("Rejected %s %s: %s", request.method, request.url.path, errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request", "errors": errors},
        )

    @app.exception_handler(SQLAlchemyError)
    async def handle_store_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        LOGGER.error("❌ Store failure on %s %s", request.method, request.url.path, exc_info=exc)
        return await handle_market_error(request, InternalError())

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        LOGGER.error("❌ Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return await handle_market_error(request, InternalError())
