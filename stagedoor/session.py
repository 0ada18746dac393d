"""
Client-side session state: where the access token lives, and where the user
is sent when the session cannot be renewed.
"""
import json
import logging
import threading
from pathlib import Path
from typing import Callable, Dict, Optional

logger = logging.getLogger("session")

ACCESS_TOKEN_KEY = "accessToken"


class TokenStore:
    """Interface for access token storage."""

    def get(self) -> Optional[str]:
        raise NotImplementedError

    def set(self, token: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class MemoryTokenStore(TokenStore):
    """Token held in process memory only."""

    def __init__(self, token: Optional[str] = None):
        self._token = token
        self._lock = threading.Lock()

    def get(self) -> Optional[str]:
        with self._lock:
            return self._token

    def set(self, token: str) -> None:
        with self._lock:
            self._token = token

    def clear(self) -> None:
        with self._lock:
            self._token = None


class FileTokenStore(TokenStore):
    """
    Token persisted in a small JSON document under a fixed key.

    The file is re-read on every get(), so a login from another process is
    picked up on the next request. Other keys in the document are preserved.
    """

    def __init__(self, path: Path, key: str = ACCESS_TOKEN_KEY):
        self.path = Path(path)
        self.key = key
        self._lock = threading.Lock()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable token file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f)

    def get(self) -> Optional[str]:
        with self._lock:
            token = self._read().get(self.key)
        return token or None

    def set(self, token: str) -> None:
        with self._lock:
            data = self._read()
            data[self.key] = token
            self._write(data)

    def clear(self) -> None:
        with self._lock:
            data = self._read()
            if self.key in data:
                del data[self.key]
                self._write(data)


class Navigator:
    """
    Tracks the current location and performs redirects.

    Headless callers pass ``on_redirect`` to react to a forced logout
    (e.g. prompt for credentials again).
    """

    def __init__(
        self,
        current_path: str = "/",
        on_redirect: Optional[Callable[[str], None]] = None,
    ):
        self.current_path = current_path
        self._on_redirect = on_redirect

    def redirect(self, path: str) -> None:
        logger.info(f"Redirecting {self.current_path} -> {path}")
        self.current_path = path
        if self._on_redirect is not None:
            self._on_redirect(path)
