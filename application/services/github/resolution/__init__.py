"""Commit resolution and its caches."""

from application.services.github.resolution.cache import CacheStore, LRUCache
from application.services.github.resolution.resolver import CommitResolver

__all__ = ["CacheStore", "CommitResolver", "LRUCache"]
