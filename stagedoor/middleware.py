"""
Request and response hooks applied around every call the access layer makes.

Request hooks take an ApiRequest and return the (possibly decorated) request
to send. Response hooks take the undecorated request and the response and
return the response the caller should see.
"""
import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Optional

import requests

from stagedoor.session import Navigator, TokenStore

logger = logging.getLogger("api_client")

AUTH_ENDPOINTS = ("/auth/login", "/auth/refresh", "/auth/logout")
REFRESH_PATH = "/api/admin/auth/refresh"


@dataclass(frozen=True)
class ApiRequest:
    """One outgoing call, before transport."""
    method: str
    url: str
    json: Any = None
    files: Optional[Dict[str, Any]] = None
    headers: Dict[str, str] = field(default_factory=dict)
    retried: bool = False

    def with_header(self, name: str, value: str) -> "ApiRequest":
        return replace(self, headers={**self.headers, name: value})


RequestHook = Callable[[ApiRequest], ApiRequest]
ResponseHook = Callable[[ApiRequest, requests.Response], requests.Response]


def is_auth_endpoint(url: str) -> bool:
    """True for login, refresh and logout URLs, which never trigger a refresh."""
    return any(path in url for path in AUTH_ENDPOINTS)


def json_content_type(request: ApiRequest) -> ApiRequest:
    """Declare a JSON body on everything except multipart uploads."""
    if request.files is not None or "Content-Type" in request.headers:
        return request
    return request.with_header("Content-Type", "application/json")


class BearerToken:
    """Attach the stored access token, if there is one."""

    def __init__(self, token_store: TokenStore):
        self._token_store = token_store

    def __call__(self, request: ApiRequest) -> ApiRequest:
        token = self._token_store.get()
        if not token:
            return request
        return request.with_header("Authorization", f"Bearer {token}")


class TokenRefresher:
    """
    Renew the access token once on a 401 and replay the original request.

    - Auth endpoints and already-replayed requests pass through untouched
    - On a successful refresh the new token is stored and the request is
      re-sent through the full hook chain; that response is final
    - On a failed refresh the token is cleared, the navigator is sent to the
      login page (unless already there) and the original 401 is returned
    """

    def __init__(
        self,
        refresh_fn: Callable[[], Optional[str]],
        resend_fn: Callable[[ApiRequest], requests.Response],
        token_store: TokenStore,
        navigator: Navigator,
        login_path: str = "/admin/login",
    ):
        self._refresh_fn = refresh_fn
        self._resend_fn = resend_fn
        self._token_store = token_store
        self._navigator = navigator
        self._login_path = login_path

    def __call__(self, request: ApiRequest, response: requests.Response) -> requests.Response:
        if response.status_code != 401:
            return response
        if request.retried or is_auth_endpoint(request.url):
            return response

        logger.info(f"401 on {request.method} {request.url}, refreshing access token")
        token = self._refresh_fn()

        if not token:
            self._token_store.clear()
            if self._navigator.current_path != self._login_path:
                self._navigator.redirect(self._login_path)
            return response

        self._token_store.set(token)
        logger.info(f"Access token refreshed, retrying {request.method} {request.url}")
        return self._resend_fn(replace(request, retried=True))
