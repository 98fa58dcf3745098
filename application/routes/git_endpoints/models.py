"""Request models for git endpoints."""

from typing import List

from pydantic import BaseModel, Field


class ResolveCommitParams(BaseModel):
    """Query parameters for commit resolution."""

    branch: str = Field(..., min_length=1, description="Branch name, may be partial")
    path: str = Field(default="", description="Path inside the repository")
    skip_cache: bool = Field(default=False, description="Bypass the short-lived cache")


class InvalidateResolutionParams(BaseModel):
    """Query parameters for dropping a cached resolution."""

    branch: str = Field(..., min_length=1)
    path: str = Field(default="")


class ReconcileTreeRequest(BaseModel):
    """Request model for tree reconciliation."""

    tree_sha: str = Field(..., min_length=1, description="Root tree sha")
    deleted_files: List[str] = Field(
        default_factory=list, description="Repository-root-relative paths to drop"
    )
