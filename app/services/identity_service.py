"""
Identity Service - Login and logout proxied to Atlas SSO
"""
from typing import Any, Dict, Optional

import httpx

from app.core.config import settings
from atams.exceptions import UnauthorizedException, ServiceUnavailableException
from atams.logging import get_logger
from atams.sso import AtlasEncryption

logger = get_logger(__name__)


class IdentityService:
    def __init__(self) -> None:
        self.base_url = settings.ATLAS_SSO_URL.rstrip("/")
        self.timeout = settings.ATLAS_TIMEOUT_SECONDS
        self.encryption = AtlasEncryption(settings.ATLAS_ENCRYPTION_KEY, settings.ATLAS_ENCRYPTION_IV)

    def _unwrap(self, response: httpx.Response) -> Dict[str, Any]:
        """Atlas may answer {encrypted: true, data: <base64>}"""
        body = response.json()
        if body.get("encrypted"):
            body = self.encryption.decrypt(body.get("data"))
        return body.get("data") or {}

    async def login(self, username: str, password: str) -> Dict[str, Any]:
        """
        Exchange credentials for Atlas tokens

        Raises:
            UnauthorizedException: Atlas rejected the credentials
            ServiceUnavailableException: Atlas could not be reached
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.base_url}/auth/login",
                    json={"username": username, "password": password}
                )
        except httpx.RequestError as e:
            logger.error("Atlas login request failed", extra={"extra_data": {"error": str(e)}})
            raise ServiceUnavailableException("Identity provider unavailable")

        if response.status_code != 200:
            raise UnauthorizedException("Invalid username or password")

        logger.info("User logged in", extra={"extra_data": {"username": username}})
        return self._unwrap(response)

    async def logout(self, access_token: Optional[str]) -> None:
        """Revoke the Atlas session; a missing token is already logged out"""
        if not access_token:
            return

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                await client.post(
                    f"{self.base_url}/auth/logout",
                    headers={"Authorization": f"Bearer {access_token}"}
                )
        except httpx.RequestError as e:
            logger.error("Atlas logout request failed", extra={"extra_data": {"error": str(e)}})
            raise ServiceUnavailableException("Identity provider unavailable")
