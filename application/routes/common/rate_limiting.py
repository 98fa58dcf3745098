"""
Rate limiting utilities for route handlers.

Provides standardized rate limit key functions.
"""

import hashlib

from quart import request

from application.routes.common.auth import get_github_credential


async def credential_rate_limit_key() -> str:
    """
    Generate rate limit key for endpoints that reach GitHub.

    Anonymous callers share the application quota, so they are limited per
    IP address; callers with their own token are limited per token.

    Returns:
        str: Token-derived key, or the client IP address for anonymous callers
    """
    credential = get_github_credential()
    if credential:
        digest = hashlib.sha256(credential.encode()).hexdigest()[:16]
        return f"token:{digest}"
    return request.remote_addr or "anonymous"
