from __future__ import annotations

import logging

from flask import Flask
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from .http import fail

logger = logging.getLogger(__name__)

# (status, code) per domain error; most specific first.
_DOMAIN_STATUS: list[tuple[type[DomainError], int, str]] = [
    (ValidationError, 400, "VALIDATION_ERROR"),
    (AuthenticationError, 401, "UNAUTHORIZED"),
    (AuthorizationError, 403, "FORBIDDEN"),
    (NotFoundError, 404, "NOT_FOUND"),
    (ConflictError, 409, "CONFLICT"),
]


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        for exc_type, status, code in _DOMAIN_STATUS:
            if isinstance(e, exc_type):
                if status == 409:
                    logger.warning("conflict: %s", e)
                return fail(str(e), status=status, code=code)
        return fail(str(e), status=400, code="VALIDATION_ERROR")

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        code = "NOT_FOUND" if e.code == 404 else "HTTP_ERROR"
        return fail(e.description or e.name, status=e.code or 500, code=code)

    @app.errorhandler(Exception)
    def _unhandled(e: Exception):
        logger.exception("unhandled error: %s", e)
        return fail("Error interno del servidor", status=500, code="INTERNAL_ERROR")
