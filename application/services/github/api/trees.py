"""
GitHub git tree operations.
"""

import logging
from typing import Optional

from application.services.github.api.client import GitHubAPIClient
from application.services.github.errors import ParseError
from application.services.github.models.types import Tree, TreeEntry

logger = logging.getLogger(__name__)


class TreeOperations:
    """Fetches single-level tree snapshots."""

    def __init__(self, client: Optional[GitHubAPIClient] = None):
        """Initialize tree operations.

        Args:
            client: GitHub API client (creates new if not provided)
        """
        self.client = client or GitHubAPIClient()

    async def get_tree(self, owner: str, repo: str, tree_sha: str) -> Tree:
        """Fetch one tree (non-recursive) by its sha.

        Entry order is kept as GitHub returned it.

        Args:
            owner: Repository owner
            repo: Repository name
            tree_sha: Tree sha

        Returns:
            Tree snapshot

        Raises:
            UpstreamError: If GitHub returns an error status
            ParseError: If the response has no tree listing
        """
        response = await self.client.get(f"repos/{owner}/{repo}/git/trees/{tree_sha}")

        if not isinstance(response, dict) or not isinstance(response.get("tree"), list):
            raise ParseError(f"Tree response for {owner}/{repo}@{tree_sha} has no entries")

        try:
            entries = [TreeEntry.from_api(item) for item in response["tree"]]
        except (KeyError, TypeError, ValueError) as e:
            raise ParseError(f"Malformed tree entry in {owner}/{repo}@{tree_sha}: {e}") from e

        truncated = bool(response.get("truncated", False))
        if truncated:
            logger.warning(f"Tree {owner}/{repo}@{tree_sha} was truncated by GitHub")

        return Tree(sha=response.get("sha", tree_sha), entries=entries, truncated=truncated)
