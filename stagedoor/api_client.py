"""
Access layer for the site's REST API
Bearer auth, 30s GET caching, in-flight de-duplication and token refresh
"""
import logging
import time
from typing import Any, Callable, Dict, List, Optional

import requests
from pydantic import ValidationError

from stagedoor.cache import RequestCoalescer, ResponseCache
from stagedoor.errors import ApiError, unreachable_message
from stagedoor.middleware import (
    REFRESH_PATH,
    ApiRequest,
    BearerToken,
    RequestHook,
    ResponseHook,
    TokenRefresher,
    json_content_type,
)
from stagedoor.schemas import ApiEnvelope, RefreshData
from stagedoor.session import FileTokenStore, MemoryTokenStore, Navigator, TokenStore
from config.settings import Settings, settings as default_settings

logger = logging.getLogger("api_client")

REQUEST_TIMEOUT_SECONDS = 10.0
CACHE_TTL_SECONDS = 30.0


class ApiClient:
    """
    One access layer per process; construct it once and pass it around.

    GET payloads are cached per URL for ``cache_ttl`` seconds and concurrent
    cached GETs for the same URL share one network call. POST, PUT and
    DELETE always go to the network. Every failure surfaces as ApiError.
    """

    def __init__(
        self,
        base_url: str = "",
        token_store: Optional[TokenStore] = None,
        navigator: Optional[Navigator] = None,
        session: Optional[requests.Session] = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        cache_ttl: float = CACHE_TTL_SECONDS,
        is_development: bool = True,
        dev_server_url: str = "http://localhost:3001",
        login_path: str = "/admin/login",
        clock: Callable[[], float] = time.monotonic,
    ):
        self.base_url = base_url.rstrip("/")
        self.token_store = token_store if token_store is not None else MemoryTokenStore()
        self.navigator = navigator if navigator is not None else Navigator()
        # The session's cookie jar carries the refresh cookie on every call
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.is_development = is_development
        self.dev_server_url = dev_server_url

        self._cache = ResponseCache(ttl_seconds=cache_ttl, clock=clock)
        self._coalescer = RequestCoalescer()

        self.request_hooks: List[RequestHook] = [
            json_content_type,
            BearerToken(self.token_store),
        ]
        self.response_hooks: List[ResponseHook] = [
            TokenRefresher(
                refresh_fn=self._refresh_access_token,
                resend_fn=self._send,
                token_store=self.token_store,
                navigator=self.navigator,
                login_path=login_path,
            ),
        ]

    # =========================================================================
    # Public verbs
    # =========================================================================

    def get(self, url: str, use_cache: bool = True) -> Any:
        """
        GET a resource and return the envelope's ``data``.

        Args:
            url: Path (or absolute URL); also the cache key
            use_cache: When False, bypass both the cache and de-duplication
        """
        if not use_cache:
            return self._execute(ApiRequest("GET", url))

        entry = self._cache.get_fresh(url)
        if entry is not None:
            return entry.data

        logger.info(f"CACHE MISS: {url}")
        return self._coalescer.get_or_fetch(url, lambda: self._fetch_and_store(url))

    def post(self, url: str, data: Any = None) -> Any:
        return self._execute(ApiRequest("POST", url, json=data))

    def put(self, url: str, data: Any = None) -> Any:
        return self._execute(ApiRequest("PUT", url, json=data))

    def delete(self, url: str) -> Any:
        return self._execute(ApiRequest("DELETE", url))

    def upload(
        self,
        url: str,
        filename: str,
        content: bytes,
        content_type: Optional[str] = None,
        field_name: str = "file",
    ) -> Any:
        """POST a multipart file upload; auth and refresh apply as for any verb."""
        files = {field_name: (filename, content, content_type or "application/octet-stream")}
        return self._execute(ApiRequest("POST", url, files=files))

    def clear_cache(self) -> int:
        """Drop every cached GET payload. In-flight requests are unaffected."""
        return self._cache.clear()

    def clear_cache_entry(self, url: str) -> bool:
        """Drop the cached payload for one URL."""
        return self._cache.invalidate(url)

    def get_stats(self) -> Dict[str, Any]:
        return {
            "cache": self._cache.get_stats(),
            "coalescer": self._coalescer.get_stats(),
        }

    # =========================================================================
    # Internals
    # =========================================================================

    def _fetch_and_store(self, url: str) -> Any:
        # A caller that missed the cache just as another request settled
        # becomes a new initiator; the payload is already stored by then.
        entry = self._cache.get_fresh(url, record=False)
        if entry is not None:
            return entry.data

        data = self._execute(ApiRequest("GET", url))
        self._cache.store(url, data)
        return data

    def _full_url(self, url: str) -> str:
        if url.startswith(("http://", "https://")):
            return url
        return f"{self.base_url}{url}"

    def _send(self, request: ApiRequest) -> requests.Response:
        """Run the hook chain around one transport call."""
        prepared = request
        for hook in self.request_hooks:
            prepared = hook(prepared)

        logger.debug(f"{prepared.method} {prepared.url}")
        response = self.session.request(
            prepared.method,
            self._full_url(prepared.url),
            headers=prepared.headers,
            json=prepared.json,
            files=prepared.files,
            timeout=self.timeout,
        )

        for response_hook in self.response_hooks:
            response = response_hook(request, response)
        return response

    def _execute(self, request: ApiRequest) -> Any:
        """Send a request and unwrap its envelope, normalizing every failure."""
        try:
            response = self._send(request)
        except (requests.ConnectionError, requests.Timeout) as e:
            logger.warning(f"No response for {request.method} {request.url}: {e}")
            raise ApiError(
                unreachable_message(self.is_development, self.dev_server_url),
                url=request.url,
            ) from e
        except requests.RequestException as e:
            logger.warning(f"Request failed for {request.method} {request.url}: {e}")
            raise ApiError(str(e), url=request.url) from e

        return self._unwrap(request, response)

    def _unwrap(self, request: ApiRequest, response: requests.Response) -> Any:
        body = _decode_json(response)
        status = response.status_code

        if not response.ok:
            error = body.get("error") if isinstance(body, dict) else None
            if isinstance(error, str) and error:
                raise ApiError(error, status_code=status, url=request.url)
            try:
                response.raise_for_status()
            except requests.HTTPError as e:
                raise ApiError(str(e), status_code=status, url=request.url) from e

        if body is None:
            if response.content:
                raise ApiError(
                    "Unexpected response format from server",
                    status_code=status,
                    url=request.url,
                )
            # Empty 2xx body (e.g. 204 after a delete)
            return None

        try:
            envelope = ApiEnvelope.model_validate(body)
        except ValidationError as e:
            raise ApiError(
                "Unexpected response format from server",
                status_code=status,
                url=request.url,
            ) from e

        if not envelope.success:
            message = envelope.error or envelope.message or "Request failed"
            raise ApiError(message, status_code=status, url=request.url)

        return envelope.data

    def _refresh_access_token(self) -> Optional[str]:
        """
        Ask the refresh endpoint for a new access token.

        Sent straight through the session (no hooks), so a 401 here can never
        trigger another refresh. Returns None on any failure.
        """
        try:
            response = self.session.request(
                "POST",
                self._full_url(REFRESH_PATH),
                headers={"Content-Type": "application/json"},
                json={},
                timeout=self.timeout,
            )
            response.raise_for_status()
            envelope = ApiEnvelope.model_validate(response.json())
            if not envelope.success or not isinstance(envelope.data, dict):
                logger.warning(f"Token refresh rejected: {envelope.error or 'no data'}")
                return None
            return RefreshData.model_validate(envelope.data).access_token or None
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Token refresh failed: {e}")
            return None


def _decode_json(response: requests.Response) -> Any:
    """Decoded JSON body, or None for an empty or non-JSON body."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        if response.ok:
            logger.warning(f"Non-JSON body from {response.url}")
        return None


def create_api_client(
    settings: Optional[Settings] = None,
    navigator: Optional[Navigator] = None,
    token_store: Optional[TokenStore] = None,
) -> ApiClient:
    """Build an ApiClient wired from settings."""
    settings = settings or default_settings
    return ApiClient(
        base_url=settings.resolve_base_url(),
        token_store=token_store or FileTokenStore(settings.token_file, settings.token_key),
        navigator=navigator,
        timeout=settings.request_timeout_seconds,
        cache_ttl=settings.cache_ttl_seconds,
        is_development=settings.is_development,
        dev_server_url=settings.dev_server_url,
        login_path=settings.login_path,
    )
