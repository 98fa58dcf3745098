"""
Shared types and models for GitHub operations.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional


class EntryType(str, Enum):
    BLOB = "blob"
    TREE = "tree"
    COMMIT = "commit"


class RepositoryRights(str, Enum):
    ADMIN = "admin"
    WRITE = "write"
    READ = "read"
    NONE = "none"


@dataclass(frozen=True)
class TreeEntry:
    """One child of a directory snapshot."""

    path: str
    type: EntryType
    sha: str
    size: Optional[int] = None
    mode: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "TreeEntry":
        return cls(
            path=data["path"],
            type=EntryType(data["type"]),
            sha=data["sha"],
            size=data.get("size"),
            mode=data.get("mode"),
        )

    def with_prefix(self, directory: str) -> "TreeEntry":
        return replace(self, path=f"{directory}/{self.path}")

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "path": self.path,
            "type": self.type.value,
            "sha": self.sha,
        }
        if self.size is not None:
            data["size"] = self.size
        if self.mode is not None:
            data["mode"] = self.mode
        return data


@dataclass
class Tree:
    """A directory snapshot: ordered entries plus the sha it was fetched from."""

    sha: str
    entries: List[TreeEntry] = field(default_factory=list)
    truncated: bool = False

    @property
    def paths(self) -> List[str]:
        return [entry.path for entry in self.entries]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sha": self.sha,
            "tree": [entry.to_dict() for entry in self.entries],
            "truncated": self.truncated,
        }


class ResolutionKey(NamedTuple):
    """Cache key for commit resolution."""

    owner: str
    repo: str
    branch: str
    path: str


@dataclass(frozen=True)
class ValidatorEntry:
    """Last known ETag for a resolution key and the sha it validated."""

    etag: str
    sha: str


@dataclass(frozen=True)
class CommitLookup:
    """Raw outcome of one upstream "latest commit" query."""

    status_code: int
    sha: Optional[str] = None
    etag: Optional[str] = None

    @property
    def not_modified(self) -> bool:
        return self.status_code == 304


@dataclass(frozen=True)
class ResolutionResult:
    commit_sha: str
    owner: str
    repo: str
    branch: str
    path: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "commitSha": self.commit_sha,
            "owner": self.owner,
            "repo": self.repo,
            "branch": self.branch,
            "path": self.path,
        }


@dataclass
class RepositoryInfo:
    name: str
    owner: str
    full_name: str
    url: str
    default_branch: str
    private: bool
    description: Optional[str] = None
    rights: RepositoryRights = RepositoryRights.NONE
