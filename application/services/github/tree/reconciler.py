"""
Tree reconciliation against a set of deleted files.

GitHub trees are fetched one level at a time. To drop files from a tree we
only expand the directories that lead to a deleted file: each such
directory entry is replaced by its children, re-pathed relative to the
repository root, and then the deleted file itself is removed. Directories
that were already expanded by an earlier deletion are no longer present as
``tree`` entries and are skipped.
"""

import logging
from typing import Awaitable, Callable, Dict, Iterable, List

from application.services.github.models.types import EntryType, Tree, TreeEntry

logger = logging.getLogger(__name__)

TreeFetcher = Callable[[str, str, str], Awaitable[Tree]]


def ancestor_directories(path: str) -> List[str]:
    """Return the directories leading to ``path``, root-most first.

    >>> ancestor_directories("a/b/c.txt")
    ['a', 'a/b']
    """
    parts = path.split("/")[:-1]
    return ["/".join(parts[: index + 1]) for index in range(len(parts))]


class TreeReconciler:
    """Flattens a tree just enough to remove a list of deleted files."""

    def __init__(self, fetch_tree: TreeFetcher):
        """
        Args:
            fetch_tree: Coroutine ``(owner, repo, sha) -> Tree`` returning one
                non-recursive tree snapshot
        """
        self._fetch_tree = fetch_tree

    async def reconcile(
        self, owner: str, repo: str, tree_sha: str, deleted_files: Iterable[str]
    ) -> Tree:
        """Fetch ``tree_sha`` and remove ``deleted_files`` from it.

        Deletions are applied in order, each one reading the entries left by
        the previous one. Paths that are not in the tree are ignored. Any fetch
        failure aborts the whole reconciliation.

        Args:
            owner: Repository owner
            repo: Repository name
            tree_sha: Root tree sha
            deleted_files: Repository-root-relative file paths

        Returns:
            Tree whose expanded entries carry root-relative paths
        """
        root = await self._fetch_tree(owner, repo, tree_sha)
        entries = list(root.entries)
        truncated = root.truncated
        subtrees: Dict[str, Tree] = {}

        for deleted in deleted_files:
            deleted = deleted.strip("/")
            for directory in ancestor_directories(deleted):
                entries = await self._expand(owner, repo, entries, directory, subtrees)
            entries = [entry for entry in entries if entry.path != deleted]

        truncated = truncated or any(subtree.truncated for subtree in subtrees.values())
        logger.info(
            f"Reconciled tree {owner}/{repo}@{tree_sha}: {len(entries)} entries, "
            f"{len(subtrees)} subtrees expanded"
        )
        return Tree(sha=root.sha, entries=entries, truncated=truncated)

    async def _expand(
        self,
        owner: str,
        repo: str,
        entries: List[TreeEntry],
        directory: str,
        subtrees: Dict[str, Tree],
    ) -> List[TreeEntry]:
        index = next(
            (
                i
                for i, entry in enumerate(entries)
                if entry.type == EntryType.TREE and entry.path == directory
            ),
            None,
        )
        if index is None:
            return entries

        sha = entries[index].sha
        if sha not in subtrees:
            logger.debug(f"Expanding {directory} ({sha}) in {owner}/{repo}")
            subtrees[sha] = await self._fetch_tree(owner, repo, sha)

        children = [child.with_prefix(directory) for child in subtrees[sha].entries]
        return entries[:index] + entries[index + 1 :] + children
