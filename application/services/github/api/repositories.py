"""
GitHub repository operations.
"""

import logging
from typing import Any, Dict, Optional

from application.services.github.api.client import GitHubAPIClient
from application.services.github.errors import ParseError, UpstreamError
from application.services.github.models.types import RepositoryInfo, RepositoryRights

logger = logging.getLogger(__name__)


def rights_from_permissions(permissions: Optional[Dict[str, Any]]) -> RepositoryRights:
    """Map the ``permissions`` block of a repository response to rights.

    GitHub only includes the block for requests made with a caller token.
    """
    if not permissions:
        return RepositoryRights.NONE
    if permissions.get("admin"):
        return RepositoryRights.ADMIN
    if permissions.get("push"):
        return RepositoryRights.WRITE
    return RepositoryRights.READ


class RepositoryOperations:
    """Handles GitHub repository operations."""

    def __init__(self, client: Optional[GitHubAPIClient] = None):
        """Initialize repository operations.

        Args:
            client: GitHub API client (creates new if not provided)
        """
        self.client = client or GitHubAPIClient()

    async def get_repository(self, owner: str, repo: str) -> RepositoryInfo:
        """Get repository information.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            RepositoryInfo with repository details

        Raises:
            UpstreamError: If request fails
            ParseError: If the response lacks repository fields
        """
        response = await self.client.get(f"repos/{owner}/{repo}")

        try:
            return RepositoryInfo(
                name=response["name"],
                owner=response["owner"]["login"],
                full_name=response["full_name"],
                url=response["html_url"],
                default_branch=response["default_branch"],
                private=response["private"],
                description=response.get("description"),
                rights=rights_from_permissions(response.get("permissions")),
            )
        except (AttributeError, KeyError, TypeError) as e:
            raise ParseError(f"Malformed repository response for {owner}/{repo}: {e}") from e

    async def get_default_branch(self, owner: str, repo: str) -> str:
        repository = await self.get_repository(owner, repo)
        return repository.default_branch

    async def repository_exists(self, owner: str, repo: str) -> bool:
        """Check whether a repository exists.

        Returns:
            False on 404, True on success

        Raises:
            UpstreamError: For any failure other than 404
        """
        try:
            await self.client.send("GET", f"repos/{owner}/{repo}")
            return True
        except UpstreamError as e:
            if e.status_code == 404:
                return False
            raise

    async def fetch_rights(self, owner: str, repo: str) -> RepositoryRights:
        """Fetch the permissions of the current credential on a repository.

        Requests without a caller token receive no ``permissions`` block
        and report ``none``, as do 401 and 403 replies.
        """
        try:
            response = await self.client.get(f"repos/{owner}/{repo}")
        except UpstreamError as e:
            if e.status_code in (401, 403):
                return RepositoryRights.NONE
            raise

        permissions = response.get("permissions") if isinstance(response, dict) else None
        return rights_from_permissions(permissions)
