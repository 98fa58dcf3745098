"""
GitHub Models Module

Shared types, enums, and dataclasses for GitHub operations.
"""

from application.services.github.models.types import (
    CommitLookup,
    EntryType,
    RepositoryInfo,
    RepositoryRights,
    ResolutionKey,
    ResolutionResult,
    Tree,
    TreeEntry,
    ValidatorEntry,
)

__all__ = [
    "CommitLookup",
    "EntryType",
    "RepositoryInfo",
    "RepositoryRights",
    "ResolutionKey",
    "ResolutionResult",
    "Tree",
    "TreeEntry",
    "ValidatorEntry",
]
