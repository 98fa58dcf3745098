"""
Validation utilities for route handlers.

Provides decorators for automatic request validation using Pydantic models.
"""

import logging
from functools import wraps
from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel, ValidationError
from quart import request

from application.routes.common.response import APIResponse

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def _format_errors(error: ValidationError) -> List[Dict[str, Any]]:
    errors = []
    for err in error.errors():
        field = " -> ".join(str(loc) for loc in err["loc"])
        errors.append({"field": field, "message": err["msg"], "type": err["type"]})
    return errors


def validate_json(model: Type[T]):
    """
    Decorator to validate JSON request body against Pydantic model.

    The validated model is available as ``request.validated_data``.
    Validation errors are returned as 400 Bad Request; errors raised by the
    handler itself are left to the registered error handlers.

    Args:
        model: Pydantic model class for validation

    Example:
        >>> @validate_json(ReconcileTreeRequest)
        >>> async def reconcile_tree(owner, repo):
        >>>     data = request.validated_data
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            json_data = await request.get_json(silent=True)

            if json_data is None:
                return APIResponse.error(
                    "Request body required",
                    400,
                    details={"expected": "application/json"},
                )

            try:
                request.validated_data = model.model_validate(json_data)
            except ValidationError as e:
                errors = _format_errors(e)
                logger.warning(f"Validation error in {func.__name__}: {errors}")
                return APIResponse.error("Validation failed", 400, details={"errors": errors})

            return await func(*args, **kwargs)

        return wrapper

    return decorator


def validate_query_params(model: Type[T]):
    """
    Decorator to validate query parameters against Pydantic model.

    The validated model is available as ``request.validated_params``.

    Args:
        model: Pydantic model class for validation
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                request.validated_params = model.model_validate(dict(request.args))
            except ValidationError as e:
                errors = _format_errors(e)
                logger.warning(
                    f"Query parameter validation error in {func.__name__}: {errors}"
                )
                return APIResponse.error(
                    "Invalid query parameters", 400, details={"errors": errors}
                )

            return await func(*args, **kwargs)

        return wrapper

    return decorator
