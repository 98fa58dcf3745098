"""
Resolve the latest commit touching a path on a branch.

GitHub URLs such as ``tree/feature/login/src/app.py`` cannot tell where the
branch name ends and the path begins. Resolution first treats the whole
remainder as a path; when GitHub answers 404 or 422 the first path segment
is moved onto the branch name and the lookup is repeated, until the path is
exhausted. Each adjusted split is cached under its own key, so a repeat
lookup within the fresh TTL stops at the split that resolved.
"""

import logging
from typing import Awaitable, Callable, Optional

from application.services.github.errors import NotFoundError, ParseError, UpstreamError
from application.services.github.models.types import (
    CommitLookup,
    ResolutionKey,
    ResolutionResult,
    ValidatorEntry,
)
from application.services.github.resolution.cache import CacheStore

logger = logging.getLogger(__name__)

# (owner, repo, branch, path, etag, credential) -> CommitLookup
CommitQuery = Callable[
    [str, str, str, str, Optional[str], Optional[str]], Awaitable[CommitLookup]
]

AMBIGUOUS_STATUS_CODES = (404, 422)


class CommitResolver:
    """Cached commit resolution with branch/path disambiguation."""

    def __init__(self, query: CommitQuery, cache: CacheStore):
        """
        Args:
            query: Upstream "latest commit" lookup
            cache: Cache store shared by all resolutions
        """
        self._query = query
        self.cache = cache

    async def resolve(
        self,
        owner: str,
        repo: str,
        branch: str,
        path: str = "",
        skip_cache: bool = False,
        credential: Optional[str] = None,
    ) -> ResolutionResult:
        """Resolve the latest commit sha for ``path`` on ``branch``.

        Args:
            owner: Repository owner
            repo: Repository name
            branch: Branch name as far as it is known
            path: Path inside the repository (may still hold part of the branch)
            skip_cache: Ignore the short-lived resolution cache
            credential: Caller GitHub token, None for the shared quota

        Returns:
            ResolutionResult with the branch/path split that resolved

        Raises:
            NotFoundError: If no branch/path split resolves
            UpstreamError: For any other GitHub failure
            ParseError: If GitHub replies with an unexpected body
        """
        key = ResolutionKey(owner, repo, branch, path)
        depth = 0

        while True:
            try:
                return await self._resolve_key(key, skip_cache, credential)
            except UpstreamError as e:
                if e.status_code not in AMBIGUOUS_STATUS_CODES:
                    logger.error(f"Commit resolution failed for {key}: {e}")
                    raise

                head, _, remainder = key.path.partition("/")
                if not head:
                    logger.warning(
                        f"Could not resolve {owner}/{repo} branch={branch!r} path={path!r} "
                        f"after {depth} retries"
                    )
                    raise NotFoundError(status_code=e.status_code) from e

                depth += 1
                key = ResolutionKey(owner, repo, f"{key.branch}/{head}", remainder)
                logger.info(
                    f"Retrying commit resolution as branch={key.branch!r} "
                    f"path={key.path!r} (retry {depth})"
                )

    async def _resolve_key(
        self, key: ResolutionKey, skip_cache: bool, credential: Optional[str]
    ) -> ResolutionResult:
        if not skip_cache:
            cached_sha = self.cache.get_fresh(key)
            if cached_sha:
                logger.debug(f"Resolution cache hit for {key}")
                return self._result(key, cached_sha)

        validator = self.cache.get_validator(key)
        lookup = await self._query(
            key.owner,
            key.repo,
            key.branch,
            key.path,
            validator.etag if validator else None,
            credential,
        )

        if lookup.not_modified:
            if validator is None:
                raise ParseError(f"GitHub replied 304 for {key} without a cached validator")
            logger.debug(f"Validator still current for {key}")
            sha = validator.sha
        else:
            if lookup.sha is None:
                raise NotFoundError(status_code=lookup.status_code)
            sha = lookup.sha
            # Only the shared quota needs protecting; token holders have plenty.
            if lookup.etag and not credential:
                self.cache.set_validator(key, ValidatorEntry(etag=lookup.etag, sha=sha))

        self.cache.set_fresh(key, sha)
        return self._result(key, sha)

    @staticmethod
    def _result(key: ResolutionKey, sha: str) -> ResolutionResult:
        return ResolutionResult(
            commit_sha=sha,
            owner=key.owner,
            repo=key.repo,
            branch=key.branch,
            path=key.path,
        )
