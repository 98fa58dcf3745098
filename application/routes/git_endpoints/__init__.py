"""Git endpoints package."""

from application.routes.git_endpoints.commits import (
    handle_invalidate_resolution,
    handle_resolve_commit,
)
from application.routes.git_endpoints.health import handle_health_check
from application.routes.git_endpoints.repository import handle_get_repository
from application.routes.git_endpoints.trees import handle_reconcile_tree

__all__ = [
    "handle_get_repository",
    "handle_health_check",
    "handle_invalidate_resolution",
    "handle_reconcile_tree",
    "handle_resolve_commit",
]
