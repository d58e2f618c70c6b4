"""
Alert Channels
==============
Destinations for critical security alerts.
"""

import logging
from typing import Optional, Protocol

import httpx
import structlog
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type, before_sleep_log

from ..errors import AlertDispatchFailure
from ..events.models import SecurityEvent

logger = structlog.get_logger(__name__)
_retry_logger = logging.getLogger(__name__)


class AlertChannel(Protocol):
    """Anything that can deliver an alert for a security event."""

    name: str

    async def send(self, event: SecurityEvent) -> None:
        ...


class LoggingAlertChannel:
    """Writes critical alerts to the structured log."""

    name = "log"

    async def send(self, event: SecurityEvent) -> None:
        logger.warning(
            "critical_security_alert",
            event_id=event.id,
            kind=event.kind.value,
            severity=event.severity.value,
            user_id=event.user_id,
            details=dict(event.details),
            timestamp=event.timestamp.isoformat(),
        )


class WebhookAlertChannel:
    """
    Posts critical alerts to an HTTP webhook.

    Transport errors are retried; an error status is not.
    """

    name = "webhook"

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
        service_name: str = "qwonen-authsec",
    ):
        self.url = url
        self.service_name = service_name
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={
                "User-Agent": f"authsec-alerts/{service_name}",
                "Content-Type": "application/json",
            },
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _payload(self, event: SecurityEvent) -> dict:
        return {
            "service": self.service_name,
            "title": "Critical security event",
            "event": event.to_dict(),
        }

    async def send(self, event: SecurityEvent) -> None:
        try:
            await self._post(self._payload(event))
        except httpx.HTTPStatusError as e:
            raise AlertDispatchFailure(
                f"Webhook rejected alert with HTTP {e.response.status_code}",
                channel=self.name,
            ) from e
        except httpx.HTTPError as e:
            raise AlertDispatchFailure(f"Webhook unreachable: {e}", channel=self.name) from e

    @retry(
        retry=retry_if_exception_type(httpx.TransportError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
        before_sleep=before_sleep_log(_retry_logger, logging.WARNING),
        reraise=True,
    )
    async def _post(self, payload: dict) -> None:
        response = await self._client.post(self.url, json=payload)
        response.raise_for_status()
