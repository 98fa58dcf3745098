"""
GitHub Service Package

Resolves repository identifiers against the GitHub REST API.

Main Components:
- GitHubService: Main facade for all GitHub operations
- API Client: GitHub REST API interactions
- Tree reconciliation: flattened trees without deleted files
- Commit resolution: cached latest-commit lookups with branch disambiguation
"""

from application.services.github.github_service import GitHubService

__all__ = ["GitHubService"]
