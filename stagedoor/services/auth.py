"""
Admin login and logout against the auth endpoints.
"""
import logging
from typing import Optional

from stagedoor.errors import ApiError
from stagedoor.schemas import LoginResponse
from stagedoor.services.base import BaseService

logger = logging.getLogger("services.auth")

LOGIN_PATH = "/api/admin/auth/login"
LOGOUT_PATH = "/api/admin/auth/logout"


class AuthService(BaseService):

    def login(self, email: str, password: str) -> LoginResponse:
        """
        Exchange credentials for an access token and store it.

        Raises:
            ApiError: On bad credentials (the 401 is not refreshed)
        """
        data = self.client.post(LOGIN_PATH, {"email": email, "password": password})
        response = LoginResponse.model_validate(data)
        self.client.token_store.set(response.access_token)
        self.client.clear_cache()
        logger.info(f"Logged in as {email}")
        return response

    def logout(self) -> None:
        """End the server session; the local token is cleared regardless."""
        try:
            self.client.post(LOGOUT_PATH)
        except ApiError as e:
            logger.warning(f"Logout error: {e}")
        finally:
            self.client.token_store.clear()
            self.client.clear_cache()

    def get_access_token(self) -> Optional[str]:
        return self.client.token_store.get()

    def is_authenticated(self) -> bool:
        return bool(self.get_access_token())
