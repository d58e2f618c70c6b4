"""
Identity Provider Clients
=========================
Sources of the identity provider's live auth configuration.
"""

from typing import Optional, Protocol

import httpx
import structlog
from pydantic import ValidationError

from ..errors import ComplianceCheckFailure
from .models import ExternalAuthSettings

logger = structlog.get_logger(__name__)


class IdentityProvider(Protocol):
    name: str

    async def fetch_settings(self) -> ExternalAuthSettings:
        ...


class StaticIdentityProvider:
    """
    Returns fixed settings.

    The defaults are the values the platform's identity provider was
    observed to carry: a 65 minute OTP expiry and a 24 hour session.
    """

    name = "static"

    def __init__(self, otp_expiry_seconds: int = 3900, session_timeout_seconds: int = 86400):
        self.settings = ExternalAuthSettings(
            otp_expiry_seconds=otp_expiry_seconds,
            session_timeout_seconds=session_timeout_seconds,
        )

    async def fetch_settings(self) -> ExternalAuthSettings:
        return self.settings


class HttpIdentityProvider:
    """
    Reads auth settings from the identity provider's admin API.

    Expects a JSON document with `otp_expiry_seconds` and
    `session_timeout_seconds`.
    """

    name = "http"

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        settings_path: str = "/auth/v1/settings",
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.settings_path = settings_path

        headers = {"Accept": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"

        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers=headers,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def fetch_settings(self) -> ExternalAuthSettings:
        try:
            response = await self._client.get(self.settings_path)
            response.raise_for_status()
            return ExternalAuthSettings.model_validate(response.json())
        except httpx.TimeoutException as e:
            raise ComplianceCheckFailure("Request timed out", provider=self.name) from e
        except httpx.HTTPStatusError as e:
            raise ComplianceCheckFailure(
                "Identity provider returned an error",
                provider=self.name,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise ComplianceCheckFailure(f"Failed to connect: {e}", provider=self.name) from e
        except (ValueError, ValidationError) as e:
            raise ComplianceCheckFailure(f"Malformed settings document: {e}", provider=self.name) from e
