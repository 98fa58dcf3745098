"""Tree reconciliation."""

from application.services.github.tree.reconciler import (
    TreeReconciler,
    ancestor_directories,
)

__all__ = ["TreeReconciler", "ancestor_directories"]
