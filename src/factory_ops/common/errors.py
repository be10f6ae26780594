from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException, MethodNotAllowed

from ..core.constants import ALLOWED_METHODS
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    MethodNotAllowedError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def _error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def _method_not_allowed(method: str, allowed) -> tuple:
    return (
        f"Method {method} Not Allowed",
        405,
        {"Allow": ", ".join(allowed), "Content-Type": "text/plain; charset=utf-8"},
    )


def register_error_handlers(app: Flask) -> None:
    """Map domain errors raised by services onto HTTP responses."""

    @app.errorhandler(ValidationError)
    def handle_validation(e: ValidationError):
        return _error(str(e), 400)

    @app.errorhandler(AuthenticationError)
    def handle_authentication(e: AuthenticationError):
        return _error(str(e), 401)

    @app.errorhandler(AuthorizationError)
    def handle_authorization(e: AuthorizationError):
        return _error(str(e), 403)

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return _error(str(e), 404)

    @app.errorhandler(MethodNotAllowedError)
    def handle_domain_method_not_allowed(e: MethodNotAllowedError):
        return _method_not_allowed(e.method, ALLOWED_METHODS)

    @app.errorhandler(MethodNotAllowed)
    def handle_method_not_allowed(e: MethodNotAllowed):
        return _method_not_allowed(request.method, e.valid_methods or ALLOWED_METHODS)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        if bool(app.config.get("DEBUG", False)):
            return _error(f"Internal server error: {e}", 500)
        return _error("Internal server error", 500)
