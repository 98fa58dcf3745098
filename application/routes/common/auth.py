"""
Credential helpers for route handlers.

Callers may forward their own GitHub token as ``Authorization: Bearer <token>``.
The token is passed through to GitHub untouched; it is never validated here.
"""

from typing import Optional

from quart import request


def get_github_credential() -> Optional[str]:
    """
    Extract the caller's GitHub token from the Authorization header.

    Returns:
        The bearer token, or None for anonymous requests
    """
    auth_header = request.headers.get("Authorization", "")
    scheme, _, token = auth_header.partition(" ")

    if scheme.lower() not in ("bearer", "token") or not token.strip():
        return None
    return token.strip()
