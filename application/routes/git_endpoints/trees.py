"""Tree reconciliation endpoint."""

from quart import request
from quart.typing import ResponseReturnValue

from application.routes.common.auth import get_github_credential
from application.routes.common.response import APIResponse
from application.routes.git_endpoints.models import ReconcileTreeRequest
from application.services.github_service_factory import get_github_service


async def handle_reconcile_tree(owner: str, repo: str) -> ResponseReturnValue:
    """
    Return a tree with deleted files removed.

    Request Body:
        {
            "tree_sha": "9fb037999f264ba9a7fc6274d15fa3ae2ab98312",
            "deleted_files": ["src/index.js"]
        }

    Returns:
        {
            "sha": "9fb03799...",
            "tree": [{"path": "README.md", "type": "blob", "sha": "..."}, ...],
            "truncated": false
        }
    """
    data: ReconcileTreeRequest = request.validated_data
    service = get_github_service()

    tree = await service.reconcile_tree_with_deletions(
        owner,
        repo,
        data.tree_sha,
        data.deleted_files,
        credential=get_github_credential(),
    )
    return APIResponse.success(tree.to_dict())
