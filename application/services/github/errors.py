"""
Errors raised by the GitHub service layer.
"""

from typing import Optional

NOT_FOUND_MESSAGE = "Could not find the specified repository or directory"


class GitHubAPIError(Exception):
    """Base class for GitHub service errors."""


class UpstreamError(GitHubAPIError):
    """A GitHub API call failed.

    ``status_code`` is the HTTP status returned by GitHub, or None when the
    request never produced a response (connection errors, timeouts).
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(GitHubAPIError):
    """No commit could be attributed to a branch/path combination."""

    def __init__(
        self, message: str = NOT_FOUND_MESSAGE, status_code: Optional[int] = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ParseError(GitHubAPIError):
    """A GitHub response did not have the expected shape."""
