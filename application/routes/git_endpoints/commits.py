"""Commit resolution endpoints."""

import logging

from quart import request
from quart.typing import ResponseReturnValue

from application.routes.common.auth import get_github_credential
from application.routes.common.response import APIResponse
from application.routes.git_endpoints.models import (
    InvalidateResolutionParams,
    ResolveCommitParams,
)
from application.services.github_service_factory import get_github_service

logger = logging.getLogger(__name__)


async def handle_resolve_commit(owner: str, repo: str) -> ResponseReturnValue:
    """
    Resolve the latest commit touching a path on a branch.

    Query:
        branch=feature&path=login/src/app.py&skip_cache=false

    Returns:
        {
            "commitSha": "6dcb09b5...",
            "owner": "octocat",
            "repo": "hello-world",
            "branch": "feature/login",
            "path": "src/app.py"
        }
    """
    params: ResolveCommitParams = request.validated_params
    service = get_github_service()

    result = await service.resolve_commit(
        owner,
        repo,
        params.branch,
        params.path,
        skip_cache=params.skip_cache,
        credential=get_github_credential(),
    )
    return APIResponse.success(result.to_dict())


async def handle_invalidate_resolution(owner: str, repo: str) -> ResponseReturnValue:
    """Drop the cached resolution for a branch/path after a known write."""
    params: InvalidateResolutionParams = request.validated_params
    service = get_github_service()

    removed = service.invalidate_resolution(owner, repo, params.branch, params.path)
    logger.info(
        f"Invalidated resolution for {owner}/{repo} branch={params.branch!r} "
        f"path={params.path!r} (removed={removed})"
    )
    return APIResponse.success({"invalidated": removed})
