"""Login, logout and password flows"""

import logging
from typing import Any, Dict, Optional

from carwash_api.errors import ApiError
from carwash_api.models import LoginResult, User
from .base import Resource

logger = logging.getLogger(__name__)


class AuthApi(Resource):
    """Session lifecycle on top of the credential store"""

    async def login(self, email: str, password: str) -> LoginResult:
        """Sign in and store the issued credential pair

        The backend's ``username`` field accepts either a username or an email.
        """
        envelope = await self.client.post(
            "/auth/login", {"username": email, "password": password}, recover=False
        )
        try:
            result = LoginResult.from_login_data(envelope["data"])
        except (KeyError, TypeError, ValueError) as e:
            raise ApiError(200, {"success": False, "error": "Malformed login response"}) from e

        self.client.set_credentials(result.tokens.access_token, result.tokens.refresh_token)
        logger.info(f"Logged in as {result.user.email or result.user.id}")
        return result

    async def logout(self) -> None:
        """Tell the backend to end the session; local credentials are cleared regardless"""
        try:
            await self.client.post("/auth/logout")
        except ApiError as e:
            logger.warning(f"Logout request failed, clearing local session anyway: {e}")
        finally:
            self.client.clear_credentials()

    async def refresh(self):
        return await self.client.refresh()

    async def current_user(self) -> User:
        envelope = await self.client.get("/auth/me")
        return User.model_validate(envelope["data"])

    async def check_auth(self) -> Optional[User]:
        """Return the signed-in user, or None when there is no usable session"""
        if not self.client.get_credentials().access_token:
            return None

        try:
            return await self.current_user()
        except ApiError as e:
            if not self.client.get_credentials().refresh_token:
                # The request pipeline already tried to refresh and ended the session
                logger.info(f"Session check failed: {e}")
                return None
            logger.info(f"Session check failed ({e}), trying an explicit refresh")

        try:
            await self.client.refresh()
            return await self.current_user()
        except ApiError as e:
            logger.warning(f"Could not restore session: {e}")
            self.client.clear_credentials()
            return None

    async def update_profile(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        avatar: Optional[str] = None,
    ) -> User:
        """Update the signed-in user's own profile; omitted fields are left as they are"""
        fields = {"name": name, "email": email, "phone": phone, "avatar": avatar}
        envelope = await self.client.put("/auth/me", {key: value for key, value in fields.items() if value is not None})
        return User.model_validate(envelope["data"])

    async def change_password(self, current_password: str, new_password: str) -> Dict[str, Any]:
        return await self.client.post(
            "/auth/change-password",
            {"currentPassword": current_password, "newPassword": new_password},
        )

    async def forgot_password(self, email: str) -> Dict[str, Any]:
        return await self.client.post("/auth/forgot-password", {"email": email}, recover=False)

    async def reset_password(self, token: str, password: str) -> Dict[str, Any]:
        return await self.client.post("/auth/reset-password", {"token": token, "password": password}, recover=False)
