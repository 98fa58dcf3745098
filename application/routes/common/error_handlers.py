"""
Centralized error handling middleware.

Provides consistent error handling across all routes with automatic
error logging and standardized response format.
"""

import logging

from pydantic import ValidationError
from quart import Quart, jsonify
from werkzeug.exceptions import HTTPException

from application.routes.common.response import APIResponse
from application.services.github.errors import NotFoundError, ParseError, UpstreamError

logger = logging.getLogger(__name__)


def register_error_handlers(app: Quart) -> None:
    """
    Register centralized error handlers for the application.

    Handles:
    - NotFoundError → 404 Not Found with the fixed user-facing message
    - UpstreamError → GitHub status for 4xx, 502 Bad Gateway otherwise
    - ParseError → 502 Bad Gateway
    - ValidationError (Pydantic) → 400 Bad Request
    - ValueError → 400 Bad Request
    - HTTPException (Werkzeug) → Appropriate status
    - Exception (Generic) → 500 Internal Server Error

    Args:
        app: Quart application instance
    """

    @app.errorhandler(NotFoundError)
    async def handle_not_found(error: NotFoundError):
        logger.info(f"Resolution not found (upstream status {error.status_code})")
        return APIResponse.not_found(error.message)

    @app.errorhandler(UpstreamError)
    async def handle_upstream_error(error: UpstreamError):
        """
        Handle failed GitHub calls.

        Client errors from GitHub (bad credentials, rate limit, missing
        repository) keep their status; server and transport errors map to 502.
        """
        status = error.status_code
        if status is None or status >= 500:
            logger.error(f"GitHub upstream failure: {error}")
            return APIResponse.error("GitHub request failed", 502, error_code="UPSTREAM_ERROR")

        logger.warning(f"GitHub rejected request (status {status}): {error}")
        return APIResponse.error(
            "GitHub rejected the request", status, error_code="UPSTREAM_ERROR"
        )

    @app.errorhandler(ParseError)
    async def handle_parse_error(error: ParseError):
        logger.error(f"Unexpected GitHub response: {error}")
        return APIResponse.error(
            "Unexpected response from GitHub", 502, error_code="PARSE_ERROR"
        )

    @app.errorhandler(ValidationError)
    async def handle_validation_error(error: ValidationError):
        """
        Handle Pydantic validation errors.

        Returns 400 Bad Request with detailed validation errors.
        """
        errors = []
        for err in error.errors():
            field = " -> ".join(str(loc) for loc in err["loc"])
            errors.append({"field": field, "message": err["msg"], "type": err["type"]})

        logger.warning(f"Validation error: {errors}")

        return APIResponse.error("Validation failed", 400, details={"errors": errors})

    @app.errorhandler(ValueError)
    async def handle_value_error(error: ValueError):
        logger.warning(f"Value error: {error}")
        return APIResponse.error(str(error), 400)

    @app.errorhandler(HTTPException)
    async def handle_http_exception(error: HTTPException):
        """
        Handle Werkzeug HTTP exceptions.

        Preserves the original HTTP status code.
        """
        logger.info(f"HTTP exception: {error.code} - {error.description}")

        return (
            jsonify(
                {"error": error.name, "message": error.description, "status": "error"}
            ),
            error.code,
        )

    @app.errorhandler(Exception)
    async def handle_generic_exception(error: Exception):
        logger.exception(f"Unhandled exception: {error}")
        return APIResponse.internal_error("An unexpected error occurred")
