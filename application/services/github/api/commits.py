"""
GitHub commit lookups.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from application.services.github.api.client import GitHubAPIClient
from application.services.github.errors import ParseError
from application.services.github.models.types import CommitLookup

logger = logging.getLogger(__name__)


class CommitOperations:
    """Handles GitHub commit queries."""

    def __init__(self, client: Optional[GitHubAPIClient] = None):
        """Initialize commit operations.

        Args:
            client: GitHub API client (creates new if not provided)
        """
        self.client = client or GitHubAPIClient()

    async def latest_commit(
        self,
        owner: str,
        repo: str,
        branch: str,
        path: str = "",
        etag: Optional[str] = None,
    ) -> CommitLookup:
        """Query the most recent commit touching ``path`` on ``branch``.

        When ``etag`` is given it is sent as ``If-None-Match``; a matching
        validator yields a 304 lookup whose body is left unparsed.

        Args:
            owner: Repository owner
            repo: Repository name
            branch: Branch name (may contain slashes)
            path: Path inside the repository, empty for the whole branch
            etag: Previously returned ETag for the same query

        Returns:
            CommitLookup with the status, the parsed sha (None when no commit
            touches the path) and the response ETag

        Raises:
            UpstreamError: If GitHub returns an error status
            ParseError: If the body does not list commits
        """
        params: Dict[str, Any] = {"sha": branch, "per_page": 1}
        if path:
            params["path"] = path

        headers = {"If-None-Match": etag} if etag else None
        response = await self.client.send(
            "GET", f"repos/{owner}/{repo}/commits", params=params, headers=headers
        )
        response_etag = response.headers.get("etag")

        if response.status_code == 304:
            return CommitLookup(status_code=304, etag=response_etag or etag)

        return CommitLookup(
            status_code=response.status_code,
            sha=self._parse_latest_sha(response),
            etag=response_etag,
        )

    async def get_latest_commit_sha_of_file(
        self, owner: str, repo: str, branch: str, path: str
    ) -> Optional[str]:
        """Uncached lookup of the latest commit sha touching a file.

        Returns:
            Commit sha, or None if no commit touches the path
        """
        lookup = await self.latest_commit(owner, repo, branch, path)
        return lookup.sha

    async def get_commit_tree_sha(self, owner: str, repo: str, commit_sha: str) -> str:
        """Get the root tree sha of a commit.

        Raises:
            UpstreamError: If GitHub returns an error status
            ParseError: If the commit has no tree
        """
        response = await self.client.get(f"repos/{owner}/{repo}/commits/{commit_sha}")
        try:
            return response["commit"]["tree"]["sha"]
        except (KeyError, TypeError) as e:
            raise ParseError(f"Commit {owner}/{repo}@{commit_sha} has no tree sha") from e

    def _parse_latest_sha(self, response: httpx.Response) -> Optional[str]:
        body = self.client.decode(response)
        if not isinstance(body, list):
            raise ParseError(f"Expected a list of commits from {response.url}")
        if not body:
            return None

        latest = body[0]
        if not isinstance(latest, dict) or not latest.get("sha"):
            raise ParseError(f"Latest commit from {response.url} has no sha")
        return latest["sha"]
