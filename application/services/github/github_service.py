"""
Main GitHub Service - facade over tree reconciliation, commit resolution and
the repository lookups the HTTP layer needs.

Every call takes an optional caller credential. A GitHub API client is
built per call for that credential; the resolution caches are shared.
"""

import logging
from typing import Iterable, Optional

import httpx

from application.services.github.api.client import GitHubAPIClient
from application.services.github.api.commits import CommitOperations
from application.services.github.api.repositories import RepositoryOperations
from application.services.github.api.trees import TreeOperations
from application.services.github.models.types import (
    CommitLookup,
    RepositoryInfo,
    RepositoryRights,
    ResolutionKey,
    ResolutionResult,
    Tree,
)
from application.services.github.resolution.cache import CacheStore
from application.services.github.resolution.resolver import CommitResolver
from application.services.github.tree.reconciler import TreeReconciler

logger = logging.getLogger(__name__)


class GitHubService:
    """
    Unified GitHub service for resolving repository identifiers.

    This is the main entry point for all GitHub-related operations in the application.
    """

    def __init__(
        self,
        cache: Optional[CacheStore] = None,
        base_url: Optional[str] = None,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize GitHub service.

        Args:
            cache: Resolution cache store (a private one is created if omitted)
            base_url: GitHub API root (defaults to config)
            client_id: Shared application client id (defaults to config)
            client_secret: Shared application client secret (defaults to config)
            transport: Custom httpx transport, used by tests
        """
        self.base_url = base_url
        self.client_id = client_id
        self.client_secret = client_secret
        self.transport = transport
        self.cache = cache if cache is not None else CacheStore()
        self.resolver = CommitResolver(query=self._query_latest_commit, cache=self.cache)

    def _client(self, credential: Optional[str] = None) -> GitHubAPIClient:
        return GitHubAPIClient(
            token=credential,
            client_id=self.client_id,
            client_secret=self.client_secret,
            base_url=self.base_url,
            transport=self.transport,
        )

    async def _query_latest_commit(
        self,
        owner: str,
        repo: str,
        branch: str,
        path: str,
        etag: Optional[str],
        credential: Optional[str],
    ) -> CommitLookup:
        commits = CommitOperations(client=self._client(credential))
        return await commits.latest_commit(owner, repo, branch, path, etag=etag)

    async def reconcile_tree_with_deletions(
        self,
        owner: str,
        repo: str,
        tree_sha: str,
        deleted_files: Iterable[str],
        credential: Optional[str] = None,
    ) -> Tree:
        """Fetch a tree and drop deleted files, expanding only the directories needed.

        Args:
            owner: Repository owner
            repo: Repository name
            tree_sha: Root tree sha
            deleted_files: Repository-root-relative paths to remove
            credential: Caller GitHub token

        Returns:
            Flattened tree without the deleted files
        """
        trees = TreeOperations(client=self._client(credential))
        reconciler = TreeReconciler(fetch_tree=trees.get_tree)
        return await reconciler.reconcile(owner, repo, tree_sha, deleted_files)

    async def resolve_commit(
        self,
        owner: str,
        repo: str,
        branch: str,
        path: str = "",
        skip_cache: bool = False,
        credential: Optional[str] = None,
    ) -> ResolutionResult:
        """Resolve the latest commit touching ``path`` on ``branch``.

        See CommitResolver.resolve.
        """
        return await self.resolver.resolve(
            owner, repo, branch, path, skip_cache=skip_cache, credential=credential
        )

    def invalidate_resolution(self, owner: str, repo: str, branch: str, path: str = "") -> bool:
        """Forget the cached resolution for a key after a known write.

        Returns:
            True if an entry was removed
        """
        return self.cache.invalidate_fresh(ResolutionKey(owner, repo, branch, path))

    async def get_commit_tree_sha(
        self, owner: str, repo: str, commit_sha: str, credential: Optional[str] = None
    ) -> str:
        commits = CommitOperations(client=self._client(credential))
        return await commits.get_commit_tree_sha(owner, repo, commit_sha)

    async def get_latest_commit_sha_of_file(
        self,
        owner: str,
        repo: str,
        branch: str,
        path: str,
        credential: Optional[str] = None,
    ) -> Optional[str]:
        commits = CommitOperations(client=self._client(credential))
        return await commits.get_latest_commit_sha_of_file(owner, repo, branch, path)

    async def get_repository(
        self, owner: str, repo: str, credential: Optional[str] = None
    ) -> RepositoryInfo:
        repositories = RepositoryOperations(client=self._client(credential))
        return await repositories.get_repository(owner, repo)

    async def get_default_branch(
        self, owner: str, repo: str, credential: Optional[str] = None
    ) -> str:
        repositories = RepositoryOperations(client=self._client(credential))
        return await repositories.get_default_branch(owner, repo)

    async def repository_exists(self, owner: str, repo: str) -> bool:
        """Check existence with the shared application credentials."""
        repositories = RepositoryOperations(client=self._client())
        return await repositories.repository_exists(owner, repo)

    async def fetch_rights(
        self, owner: str, repo: str, credential: Optional[str] = None
    ) -> RepositoryRights:
        repositories = RepositoryOperations(client=self._client(credential))
        return await repositories.fetch_rights(owner, repo)
