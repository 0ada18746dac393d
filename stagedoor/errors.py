"""
The single error type raised by the access layer.
"""
from typing import Optional


DEV_UNREACHABLE_MESSAGE = (
    "Cannot connect to the server. Make sure the API server is running at {server_url}"
)
PROD_UNREACHABLE_MESSAGE = "Cannot connect to the server. Please try again later."


class ApiError(Exception):
    """
    A failed API call, normalized.

    Callers only need ``message``; ``status_code`` is None when no response
    was received at all.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.url = url

    def __repr__(self) -> str:
        return f"ApiError({self.message!r}, status_code={self.status_code!r}, url={self.url!r})"


def unreachable_message(is_development: bool, server_url: str) -> str:
    """Message used when the server could not be reached at all."""
    if is_development:
        return DEV_UNREACHABLE_MESSAGE.format(server_url=server_url)
    return PROD_UNREACHABLE_MESSAGE
