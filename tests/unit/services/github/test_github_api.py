"""Tests for the GitHub API client and operation wrappers."""

import base64

import httpx
import pytest

from application.services.github.api.client import GitHubAPIClient
from application.services.github.api.commits import CommitOperations
from application.services.github.api.repositories import RepositoryOperations
from application.services.github.api.trees import TreeOperations
from application.services.github.errors import ParseError, UpstreamError
from application.services.github.models.types import EntryType, RepositoryRights

BASE_URL = "https://api.github.test"


def make_client(handler, token=None) -> GitHubAPIClient:
    return GitHubAPIClient(
        token=token,
        client_id="app-id",
        client_secret="app-secret",
        base_url=BASE_URL,
        transport=httpx.MockTransport(handler),
    )


class TestGitHubAPIClient:
    """Test GitHubAPIClient request handling."""

    @pytest.mark.asyncio
    async def test_token_uses_bearer_authorization(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json={})

        client = make_client(handler, token="ghp_secret")
        await client.get("repos/octocat/hello")

        assert seen["auth"] == "Bearer ghp_secret"
        assert client.has_credential is True

    @pytest.mark.asyncio
    async def test_anonymous_uses_application_basic_auth(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json={})

        client = make_client(handler)
        await client.get("repos/octocat/hello")

        expected = base64.b64encode(b"app-id:app-secret").decode()
        assert seen["auth"] == f"Basic {expected}"
        assert client.has_credential is False

    @pytest.mark.asyncio
    async def test_error_status_raises_upstream_error(self):
        client = make_client(lambda request: httpx.Response(404, json={"message": "Not Found"}))

        with pytest.raises(UpstreamError) as exc_info:
            await client.get("repos/octocat/missing")

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_transport_error_has_no_status(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)

        with pytest.raises(UpstreamError) as exc_info:
            await client.get("repos/octocat/hello")

        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_non_json_body_is_parse_error(self):
        client = make_client(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(ParseError):
            await client.get("repos/octocat/hello")


class TestTreeOperations:
    """Test TreeOperations.get_tree."""

    @pytest.mark.asyncio
    async def test_get_tree_preserves_order(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/repos/octocat/hello/git/trees/t0"
            return httpx.Response(
                200,
                json={
                    "sha": "t0",
                    "truncated": False,
                    "tree": [
                        {"path": "src", "mode": "040000", "type": "tree", "sha": "t1"},
                        {"path": "README.md", "mode": "100644", "type": "blob", "sha": "b1", "size": 12},
                    ],
                },
            )

        tree = await TreeOperations(make_client(handler)).get_tree("octocat", "hello", "t0")

        assert tree.sha == "t0"
        assert tree.paths == ["src", "README.md"]
        assert tree.entries[0].type == EntryType.TREE
        assert tree.entries[1].size == 12
        assert tree.entries[1].mode == "100644"

    @pytest.mark.asyncio
    async def test_missing_tree_listing_is_parse_error(self):
        client = make_client(lambda request: httpx.Response(200, json={"sha": "t0"}))

        with pytest.raises(ParseError):
            await TreeOperations(client).get_tree("octocat", "hello", "t0")

    @pytest.mark.asyncio
    async def test_fetch_failure_keeps_status(self):
        client = make_client(lambda request: httpx.Response(409, json={"message": "Git Repository is empty."}))

        with pytest.raises(UpstreamError) as exc_info:
            await TreeOperations(client).get_tree("octocat", "hello", "t0")

        assert exc_info.value.status_code == 409


class TestCommitOperations:
    """Test CommitOperations lookups."""

    @pytest.mark.asyncio
    async def test_latest_commit_parses_first_entry(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["params"] = dict(request.url.params)
            seen["if_none_match"] = request.headers.get("If-None-Match")
            return httpx.Response(
                200,
                json=[{"sha": "newest"}, {"sha": "older"}],
                headers={"ETag": 'W/"abc"'},
            )

        lookup = await CommitOperations(make_client(handler)).latest_commit(
            "octocat", "hello", "feature/x", "src/app.py"
        )

        assert lookup.sha == "newest"
        assert lookup.etag == 'W/"abc"'
        assert lookup.not_modified is False
        assert seen["params"] == {"sha": "feature/x", "per_page": "1", "path": "src/app.py"}
        assert seen["if_none_match"] is None

    @pytest.mark.asyncio
    async def test_empty_path_is_not_sent(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json=[{"sha": "head"}])

        await CommitOperations(make_client(handler)).latest_commit("octocat", "hello", "main")

        assert "path" not in seen["params"]

    @pytest.mark.asyncio
    async def test_etag_sent_and_not_modified_body_ignored(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["if_none_match"] = request.headers.get("If-None-Match")
            return httpx.Response(304)

        lookup = await CommitOperations(make_client(handler)).latest_commit(
            "octocat", "hello", "main", "src", etag='W/"abc"'
        )

        assert seen["if_none_match"] == 'W/"abc"'
        assert lookup.not_modified is True
        assert lookup.sha is None
        assert lookup.etag == 'W/"abc"'

    @pytest.mark.asyncio
    async def test_empty_commit_list_has_no_sha(self):
        client = make_client(lambda request: httpx.Response(200, json=[]))

        lookup = await CommitOperations(client).latest_commit("octocat", "hello", "main", "nope")

        assert lookup.sha is None
        assert lookup.status_code == 200

    @pytest.mark.asyncio
    async def test_commit_without_sha_is_parse_error(self):
        client = make_client(lambda request: httpx.Response(200, json=[{"commit": {}}]))

        with pytest.raises(ParseError):
            await CommitOperations(client).latest_commit("octocat", "hello", "main")

    @pytest.mark.asyncio
    async def test_non_list_body_is_parse_error(self):
        client = make_client(lambda request: httpx.Response(200, json={"sha": "abc"}))

        with pytest.raises(ParseError):
            await CommitOperations(client).latest_commit("octocat", "hello", "main")

    @pytest.mark.asyncio
    async def test_get_commit_tree_sha(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/repos/octocat/hello/commits/c1"
            return httpx.Response(200, json={"sha": "c1", "commit": {"tree": {"sha": "t0"}}})

        tree_sha = await CommitOperations(make_client(handler)).get_commit_tree_sha(
            "octocat", "hello", "c1"
        )

        assert tree_sha == "t0"

    @pytest.mark.asyncio
    async def test_get_latest_commit_sha_of_file(self):
        client = make_client(lambda request: httpx.Response(200, json=[]))

        sha = await CommitOperations(client).get_latest_commit_sha_of_file(
            "octocat", "hello", "main", "missing.txt"
        )

        assert sha is None


REPO_BODY = {
    "name": "hello",
    "owner": {"login": "octocat"},
    "full_name": "octocat/hello",
    "html_url": "https://github.com/octocat/hello",
    "default_branch": "trunk",
    "private": False,
    "description": None,
}


class TestRepositoryOperations:
    """Test RepositoryOperations."""

    @pytest.mark.asyncio
    async def test_get_repository_and_default_branch(self):
        client = make_client(lambda request: httpx.Response(200, json=REPO_BODY))
        operations = RepositoryOperations(client)

        info = await operations.get_repository("octocat", "hello")

        assert info.full_name == "octocat/hello"
        assert await operations.get_default_branch("octocat", "hello") == "trunk"

    @pytest.mark.asyncio
    async def test_get_repository_reads_rights_from_same_response(self):
        paths = []

        def handler(request: httpx.Request) -> httpx.Response:
            paths.append(request.url.path)
            body = dict(REPO_BODY, permissions={"admin": False, "push": True, "pull": True})
            return httpx.Response(200, json=body)

        info = await RepositoryOperations(make_client(handler, token="ghp_token")).get_repository(
            "octocat", "hello"
        )

        assert info.rights == RepositoryRights.WRITE
        assert paths == ["/repos/octocat/hello"]

    @pytest.mark.asyncio
    async def test_anonymous_repository_has_no_rights(self):
        client = make_client(lambda request: httpx.Response(200, json=REPO_BODY))

        info = await RepositoryOperations(client).get_repository("octocat", "hello")

        assert info.rights == RepositoryRights.NONE

    @pytest.mark.asyncio
    async def test_repository_exists(self):
        found = RepositoryOperations(make_client(lambda request: httpx.Response(200, json=REPO_BODY)))
        missing = RepositoryOperations(make_client(lambda request: httpx.Response(404, json={})))
        broken = RepositoryOperations(make_client(lambda request: httpx.Response(500, json={})))

        assert await found.repository_exists("octocat", "hello") is True
        assert await missing.repository_exists("octocat", "nope") is False
        with pytest.raises(UpstreamError):
            await broken.repository_exists("octocat", "hello")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "permissions, expected",
        [
            ({"admin": True, "push": True, "pull": True}, RepositoryRights.ADMIN),
            ({"admin": False, "push": True, "pull": True}, RepositoryRights.WRITE),
            ({"admin": False, "push": False, "pull": True}, RepositoryRights.READ),
            (None, RepositoryRights.NONE),
        ],
    )
    async def test_fetch_rights(self, permissions, expected):
        body = dict(REPO_BODY)
        if permissions is not None:
            body["permissions"] = permissions
        client = make_client(lambda request: httpx.Response(200, json=body), token="ghp_token")

        assert await RepositoryOperations(client).fetch_rights("octocat", "hello") == expected

    @pytest.mark.asyncio
    async def test_fetch_rights_forbidden_is_none(self):
        client = make_client(lambda request: httpx.Response(403, json={}))

        rights = await RepositoryOperations(client).fetch_rights("octocat", "hello")

        assert rights == RepositoryRights.NONE
