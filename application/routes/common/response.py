"""
Response utilities for standardized API responses.

Provides consistent response formatting across all routes.
"""

from typing import Any, Dict, Optional, Tuple

from quart import Response, jsonify


class APIResponse:
    """
    Standardized API response helper.

    Ensures consistent response format across all endpoints.
    """

    @staticmethod
    def success(data: Any, status: int = 200) -> Tuple[Response, int]:
        """
        Create a successful response.

        Args:
            data: Response data (dict, list, or serializable object)
            status: HTTP status code (default: 200)

        Returns:
            tuple: (Response object, status code)

        Example:
            >>> return APIResponse.success(result.to_dict())
        """
        return jsonify(data), status

    @staticmethod
    def error(
        message: str,
        status: int = 400,
        details: Any = None,
        error_code: Optional[str] = None,
    ) -> Tuple[Response, int]:
        """
        Create an error response.

        Args:
            message: Error message
            status: HTTP status code (default: 400)
            details: Additional error details (optional)
            error_code: Error code for client-side handling (optional)

        Returns:
            tuple: (Response object, status code)

        Example:
            >>> return APIResponse.error("Invalid request", 400)
            >>> return APIResponse.error("GitHub unavailable", 502, error_code="UPSTREAM_ERROR")
        """
        error_data: Dict[str, Any] = {"error": message}
        if details is not None:
            error_data["details"] = details
        if error_code is not None:
            error_data["error_code"] = error_code
        return jsonify(error_data), status

    @staticmethod
    def not_found(message: str = "Resource not found") -> Tuple[Response, int]:
        return APIResponse.error(message, 404, error_code="NOT_FOUND")

    @staticmethod
    def internal_error(message: str = "Internal server error") -> Tuple[Response, int]:
        return APIResponse.error(message, 500)
