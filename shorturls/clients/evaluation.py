"""Client for the external evaluation service.

The evaluation service hands out bearer tokens in exchange for registered
credentials and accepts structured log entries from authenticated callers.
"""

from typing import Any, Dict, Optional

import httpx
from loguru import logger

from shorturls.core.config import Settings, settings as default_settings
from shorturls.services.exceptions import AccessTokenError, LogSubmissionError


class EvaluationServiceClient:
    """Async HTTP client for the evaluation service's auth and logs endpoints."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            settings: Endpoint URLs, credentials and timeout
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.settings = settings or default_settings
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=self._transport,
            timeout=self.settings.EVALUATION_TIMEOUT_SECONDS,
        )

    def _credentials(self) -> Dict[str, str]:
        return {
            "email": self.settings.EVALUATION_EMAIL,
            "name": self.settings.EVALUATION_NAME,
            "rollNo": self.settings.EVALUATION_ROLL_NO,
            "accessCode": self.settings.EVALUATION_ACCESS_CODE,
            "clientID": self.settings.EVALUATION_CLIENT_ID,
            "clientSecret": self.settings.EVALUATION_CLIENT_SECRET,
        }

    async def fetch_access_token(self) -> str:
        """
        Exchange the configured credentials for an access token.

        Returns:
            str: The access token

        Raises:
            AccessTokenError: On transport errors, non-2xx replies or a reply without a token
        """
        try:
            async with self._client() as client:
                response = await client.post(self.settings.EVALUATION_AUTH_URL, json=self._credentials())
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error("Access token request rejected", status_code=e.response.status_code)
            raise AccessTokenError(f"Auth endpoint returned {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error("Access token request failed", error=str(e))
            raise AccessTokenError(f"Failed to reach auth endpoint: {e}") from e
        except ValueError as e:
            raise AccessTokenError("Auth endpoint returned a non-JSON body") from e

        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            raise AccessTokenError("Auth endpoint reply did not contain an access token")
        return token

    async def send_log(
        self,
        access_token: str,
        stack: str,
        level: str,
        package: str,
        message: str,
    ) -> Any:
        """
        Submit one log entry.

        Args:
            access_token: Token from fetch_access_token (or a token relay)
            stack: Emitting stack, e.g. "backend"
            level: Severity, e.g. "info"
            package: Emitting package or module
            message: Log message

        Returns:
            The JSON body returned by the logs endpoint

        Raises:
            LogSubmissionError: On transport errors or non-2xx replies
        """
        headers = {"Authorization": f"Bearer {access_token}"}
        payload = {"stack": stack, "level": level, "package": package, "message": message}
        try:
            async with self._client() as client:
                response = await client.post(self.settings.EVALUATION_LOGS_URL, json=payload, headers=headers)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            raise LogSubmissionError(f"Logging failed: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise LogSubmissionError(f"Failed to reach logs endpoint: {e}") from e
        except ValueError as e:
            raise LogSubmissionError("Logs endpoint returned a non-JSON body") from e

    async def fetch_relayed_token(self, token_url: Optional[str] = None) -> str:
        """
        Get a token from a token relay such as the shortener's /auth/accessToken.

        The relay may answer {"accessToken": ...}, {"token": ...} or a bare JSON string.

        Raises:
            AccessTokenError: If no token can be obtained
        """
        url = token_url or self.settings.RELAY_TOKEN_URL
        try:
            async with self._client() as client:
                response = await client.get(url)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            raise AccessTokenError(f"Failed to get access token: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise AccessTokenError(f"Failed to reach token relay: {e}") from e
        except ValueError as e:
            raise AccessTokenError("Token relay returned a non-JSON body") from e

        if isinstance(data, dict):
            token = data.get("accessToken") or data.get("token")
        else:
            token = data
        if not token or not isinstance(token, str):
            raise AccessTokenError("Token relay reply did not contain an access token")
        return token
