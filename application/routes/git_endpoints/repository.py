"""Repository info endpoint."""

from quart.typing import ResponseReturnValue

from application.routes.common.auth import get_github_credential
from application.routes.common.response import APIResponse
from application.services.github_service_factory import get_github_service


async def handle_get_repository(owner: str, repo: str) -> ResponseReturnValue:
    """
    Get repository metadata and the caller's rights on it.

    Returns:
        {
            "name": "hello-world",
            "owner": "octocat",
            "fullName": "octocat/hello-world",
            "defaultBranch": "main",
            "private": false,
            "rights": "read"
        }
    """
    service = get_github_service()

    # Rights come from the permissions block of the same repository response.
    info = await service.get_repository(owner, repo, credential=get_github_credential())

    return APIResponse.success(
        {
            "name": info.name,
            "owner": info.owner,
            "fullName": info.full_name,
            "url": info.url,
            "defaultBranch": info.default_branch,
            "private": info.private,
            "description": info.description,
            "rights": info.rights.value,
        }
    )
