"""
GitHub API Module

Handles the GitHub REST API interactions:
- Git tree snapshots
- Commit lookups
- Repository metadata and permissions
"""

from application.services.github.api.client import GitHubAPIClient
from application.services.github.api.commits import CommitOperations
from application.services.github.api.repositories import RepositoryOperations
from application.services.github.api.trees import TreeOperations

__all__ = [
    "GitHubAPIClient",
    "CommitOperations",
    "RepositoryOperations",
    "TreeOperations",
]
