"""
Application services package.

Contains the GitHub resolution services.
"""

from application.services.github.github_service import GitHubService
from application.services.github_service_factory import (
    GitHubServiceFactory,
    get_cache_store,
    get_github_service,
    reset_github_service,
)

__all__ = [
    "GitHubService",
    "GitHubServiceFactory",
    "get_cache_store",
    "get_github_service",
    "reset_github_service",
]
