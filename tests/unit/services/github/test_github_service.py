"""Tests for the GitHubService facade and its factory."""

from typing import List

import httpx
import pytest

from application.services.github.errors import NotFoundError
from application.services.github.github_service import GitHubService
from application.services.github.models.types import ResolutionKey
from application.services.github.resolution.cache import CacheStore
from application.services.github_service_factory import (
    get_cache_store,
    get_github_service,
    reset_github_service,
)


class FakeGitHub:
    """Minimal GitHub API served through httpx.MockTransport."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.trees = {
            "t0": [
                {"path": "src", "mode": "040000", "type": "tree", "sha": "t1"},
                {"path": "README.md", "mode": "100644", "type": "blob", "sha": "b1"},
            ],
            "t1": [
                {"path": "index.js", "mode": "100644", "type": "blob", "sha": "b2"},
                {"path": "utils.js", "mode": "100644", "type": "blob", "sha": "b3"},
            ],
        }
        self.branches = {"main": "c1", "feature/login": "c2"}
        self.etag = 'W/"commits-v1"'

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path.startswith("/repos/octocat/hello/git/trees/"):
            sha = path.rsplit("/", 1)[-1]
            if sha not in self.trees:
                return httpx.Response(404, json={"message": "Not Found"})
            return httpx.Response(200, json={"sha": sha, "tree": self.trees[sha], "truncated": False})

        if path == "/repos/octocat/hello/commits":
            branch = request.url.params["sha"]
            if branch not in self.branches:
                return httpx.Response(404, json={"message": "No commit found for SHA"})
            if request.headers.get("If-None-Match") == self.etag:
                return httpx.Response(304, headers={"ETag": self.etag})
            return httpx.Response(
                200, json=[{"sha": self.branches[branch]}], headers={"ETag": self.etag}
            )

        return httpx.Response(404, json={"message": "Not Found"})

    @property
    def commit_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/commits")]


@pytest.fixture
def github():
    return FakeGitHub()


@pytest.fixture
def service(github, fake_clock):
    return GitHubService(
        cache=CacheStore(clock=fake_clock),
        base_url="https://api.github.test",
        client_id="app-id",
        client_secret="app-secret",
        transport=httpx.MockTransport(github.handler),
    )


class TestReconcileTreeWithDeletions:
    """Test GitHubService.reconcile_tree_with_deletions."""

    @pytest.mark.asyncio
    async def test_removes_deleted_file(self, service, github):
        tree = await service.reconcile_tree_with_deletions(
            "octocat", "hello", "t0", ["src/index.js"]
        )

        assert [(e.path, e.sha) for e in tree.entries] == [
            ("README.md", "b1"),
            ("src/utils.js", "b3"),
        ]
        assert len(github.requests) == 2

    @pytest.mark.asyncio
    async def test_to_dict(self, service):
        tree = await service.reconcile_tree_with_deletions("octocat", "hello", "t0", ["README.md"])

        assert tree.to_dict() == {
            "sha": "t0",
            "tree": [{"path": "src", "type": "tree", "sha": "t1", "mode": "040000"}],
            "truncated": False,
        }


class TestResolveCommit:
    """Test GitHubService.resolve_commit end to end."""

    @pytest.mark.asyncio
    async def test_repeated_resolution_hits_github_once(self, service, github):
        first = await service.resolve_commit("octocat", "hello", "main", "src")
        second = await service.resolve_commit("octocat", "hello", "main", "src")

        assert first.commit_sha == second.commit_sha == "c1"
        assert len(github.commit_requests) == 1

    @pytest.mark.asyncio
    async def test_revalidation_after_ttl(self, service, github, fake_clock):
        await service.resolve_commit("octocat", "hello", "main", "src")
        fake_clock.advance(10)
        result = await service.resolve_commit("octocat", "hello", "main", "src")

        assert result.commit_sha == "c1"
        assert github.commit_requests[1].headers["If-None-Match"] == github.etag

    @pytest.mark.asyncio
    async def test_credentialed_resolution_skips_validator_cache(self, service, github):
        await service.resolve_commit("octocat", "hello", "main", "src", credential="ghp_token")

        key = ResolutionKey("octocat", "hello", "main", "src")
        assert service.cache.get_validator(key) is None
        assert github.commit_requests[0].headers["Authorization"] == "Bearer ghp_token"

    @pytest.mark.asyncio
    async def test_branch_with_slash(self, service):
        result = await service.resolve_commit("octocat", "hello", "feature", "login/src/app.py")

        assert result.commit_sha == "c2"
        assert result.branch == "feature/login"
        assert result.path == "src/app.py"

    @pytest.mark.asyncio
    async def test_unknown_branch(self, service):
        with pytest.raises(NotFoundError):
            await service.resolve_commit("octocat", "hello", "nope", "src/app.py")

    @pytest.mark.asyncio
    async def test_invalidate_resolution(self, service, github):
        await service.resolve_commit("octocat", "hello", "main", "src")

        assert service.invalidate_resolution("octocat", "hello", "main", "src") is True
        await service.resolve_commit("octocat", "hello", "main", "src")

        assert len(github.commit_requests) == 2


class TestGitHubServiceFactory:
    """Test the process-wide service accessors."""

    def test_cache_store_is_shared(self):
        assert get_cache_store() is get_cache_store()
        assert get_github_service().cache is get_cache_store()

    def test_service_is_shared(self):
        assert get_github_service() is get_github_service()

    def test_reset(self):
        store = get_cache_store()
        reset_github_service()

        assert get_cache_store() is not store
