"""
GitHub API client for making requests on behalf of a caller.

Requests made with a caller-supplied token use bearer authorization.
Requests without one fall back to the shared application client id/secret,
which runs against GitHub's lower anonymous rate quota.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from application.services.github.errors import ParseError, UpstreamError
from common.config.config import (
    GITHUB_API_URL,
    GITHUB_API_VERSION,
    GITHUB_CLIENT_ID,
    GITHUB_CLIENT_SECRET,
    GITHUB_CONNECT_TIMEOUT,
    GITHUB_REQUEST_TIMEOUT,
)

logger = logging.getLogger(__name__)


class GitHubAPIClient:
    """Base client for GitHub REST API interactions."""

    def __init__(
        self,
        token: Optional[str] = None,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize GitHub API client.

        Args:
            token: Caller-supplied GitHub token (optional)
            client_id: Shared application client id (defaults to config)
            client_secret: Shared application client secret (defaults to config)
            base_url: API root (defaults to config)
            transport: Custom httpx transport, used by tests
        """
        self.token = token
        self.client_id = client_id or GITHUB_CLIENT_ID
        self.client_secret = client_secret or GITHUB_CLIENT_SECRET
        self.base_url = (base_url or GITHUB_API_URL).rstrip("/")
        self._transport = transport

        if not token and not (self.client_id and self.client_secret):
            logger.warning(
                "GitHub API client initialized without token or client credentials - "
                "requests will use the unauthenticated rate limit"
            )

    @property
    def has_credential(self) -> bool:
        """Whether requests carry a caller-supplied token."""
        return bool(self.token)

    def _get_headers(self) -> Dict[str, str]:
        """Get headers for GitHub API requests.

        Returns:
            Headers dictionary
        """
        headers = {
            "Accept": "application/vnd.github.v3+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _get_auth(self) -> Optional[httpx.BasicAuth]:
        if self.token or not (self.client_id and self.client_secret):
            return None
        return httpx.BasicAuth(self.client_id, self.client_secret)

    async def send(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """Make a GitHub API request and return the raw response.

        Any status below 400 is returned, including 304 Not Modified.

        Args:
            method: HTTP method
            path: API path (without base URL)
            params: Query parameters
            data: Request body data
            headers: Extra headers merged over the defaults

        Returns:
            HTTP response

        Raises:
            UpstreamError: If the request fails or GitHub returns an error status
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        request_headers = {**self._get_headers(), **(headers or {})}
        timeout_config = httpx.Timeout(GITHUB_REQUEST_TIMEOUT, connect=GITHUB_CONNECT_TIMEOUT)

        try:
            async with httpx.AsyncClient(
                timeout=timeout_config, trust_env=False, transport=self._transport
            ) as client:
                response = await client.request(
                    method.upper(),
                    url,
                    params=params,
                    json=data,
                    headers=request_headers,
                    auth=self._get_auth(),
                )
        except httpx.RequestError as e:
            error_msg = f"GitHub API request error: {e}"
            logger.error(error_msg)
            raise UpstreamError(error_msg) from e

        if response.status_code >= 400:
            error_msg = (
                f"GitHub API {method.upper()} {url} failed "
                f"(status {response.status_code}): {response.text}"
            )
            logger.warning(error_msg)
            raise UpstreamError(error_msg, status_code=response.status_code)

        logger.info(
            f"GitHub API {method.upper()} request to {url} "
            f"successful (status: {response.status_code})"
        )
        return response

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Make a GET request and decode the JSON body.

        Args:
            path: API path
            params: Query parameters

        Returns:
            Decoded response body

        Raises:
            UpstreamError: If the request fails
            ParseError: If the body is not JSON
        """
        response = await self.send("GET", path, params=params)
        return self.decode(response)

    @staticmethod
    def decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"GitHub returned a non-JSON body for {response.url}") from e
