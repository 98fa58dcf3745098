"""
Git routes for resolving GitHub repository identifiers.

Thin wrappers over git_endpoints; errors raised by the GitHub service are
turned into responses by the handlers in routes.common.error_handlers.
"""

from datetime import timedelta

from quart import Blueprint
from quart.typing import ResponseReturnValue
from quart_rate_limiter import rate_limit

from application.routes.common.rate_limiting import credential_rate_limit_key
from application.routes.common.validation import validate_json, validate_query_params
from application.routes.git_endpoints import (
    handle_get_repository,
    handle_health_check,
    handle_invalidate_resolution,
    handle_reconcile_tree,
    handle_resolve_commit,
)
from application.routes.git_endpoints.models import (
    InvalidateResolutionParams,
    ReconcileTreeRequest,
    ResolveCommitParams,
)

git_bp = Blueprint("git", __name__, url_prefix="/api/v1/git")


@git_bp.route("/health", methods=["GET"])
async def health_check() -> ResponseReturnValue:
    return await handle_health_check()


@git_bp.route("/<owner>/<repo>", methods=["GET"])
@rate_limit(60, timedelta(minutes=1), key_function=credential_rate_limit_key)
async def get_repository(owner: str, repo: str) -> ResponseReturnValue:
    return await handle_get_repository(owner, repo)


@git_bp.route("/<owner>/<repo>/commit", methods=["GET"])
@rate_limit(300, timedelta(minutes=1), key_function=credential_rate_limit_key)
@validate_query_params(ResolveCommitParams)
async def resolve_commit(owner: str, repo: str) -> ResponseReturnValue:
    return await handle_resolve_commit(owner, repo)


@git_bp.route("/<owner>/<repo>/commit", methods=["DELETE"])
@validate_query_params(InvalidateResolutionParams)
async def invalidate_resolution(owner: str, repo: str) -> ResponseReturnValue:
    return await handle_invalidate_resolution(owner, repo)


@git_bp.route("/<owner>/<repo>/tree/reconcile", methods=["POST"])
@rate_limit(60, timedelta(minutes=1), key_function=credential_rate_limit_key)
@validate_json(ReconcileTreeRequest)
async def reconcile_tree(owner: str, repo: str) -> ResponseReturnValue:
    return await handle_reconcile_tree(owner, repo)
