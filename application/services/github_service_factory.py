"""
GitHub Service Factory

Creates GitHubService instances that share one process-wide resolution
cache. The cache is created lazily on first use from the environment
configuration and lives for the lifetime of the process.
"""

import logging
import threading
from typing import Optional

from application.services.github.github_service import GitHubService
from application.services.github.resolution.cache import CacheStore
from common.config.config import (
    RESOLUTION_CACHE_MAX_SIZE,
    RESOLUTION_CACHE_TTL_SECONDS,
    VALIDATOR_CACHE_MAX_SIZE,
)

logger = logging.getLogger(__name__)

_cache_store: Optional[CacheStore] = None
_github_service: Optional[GitHubService] = None
_lock = threading.Lock()


class GitHubServiceFactory:
    """Factory for creating GitHubService instances."""

    @staticmethod
    def create_cache_store() -> CacheStore:
        """Create a cache store sized from configuration."""
        logger.info(
            f"Creating resolution cache store (fresh={RESOLUTION_CACHE_MAX_SIZE} entries, "
            f"ttl={RESOLUTION_CACHE_TTL_SECONDS}s, validator={VALIDATOR_CACHE_MAX_SIZE} entries)"
        )
        return CacheStore(
            fresh_max_size=RESOLUTION_CACHE_MAX_SIZE,
            fresh_ttl=RESOLUTION_CACHE_TTL_SECONDS,
            validator_max_size=VALIDATOR_CACHE_MAX_SIZE,
        )

    @staticmethod
    def create(cache: Optional[CacheStore] = None) -> GitHubService:
        """
        Create GitHubService bound to a cache store.

        Args:
            cache: Cache store (defaults to the process-wide one)

        Returns:
            GitHubService instance
        """
        return GitHubService(cache=cache if cache is not None else get_cache_store())


def get_cache_store() -> CacheStore:
    """Return the process-wide cache store, creating it on first use."""
    global _cache_store
    if _cache_store is None:
        with _lock:
            if _cache_store is None:
                _cache_store = GitHubServiceFactory.create_cache_store()
    return _cache_store


def get_github_service() -> GitHubService:
    """
    Convenience function to get the shared GitHubService.

    Returns:
        GitHubService instance
    """
    global _github_service
    if _github_service is None:
        cache = get_cache_store()
        with _lock:
            if _github_service is None:
                _github_service = GitHubServiceFactory.create(cache=cache)
    return _github_service


def reset_github_service() -> None:
    """Drop the shared service and caches (used by tests)."""
    global _cache_store, _github_service
    with _lock:
        _cache_store = None
        _github_service = None
