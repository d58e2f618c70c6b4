"""
Alert Dispatcher
================
Fire-and-forget delivery of critical security alerts.
"""

import asyncio
import concurrent.futures
import threading
from typing import Any, Dict, Optional, Set

import structlog

from ..events.models import SecurityEvent
from .channels import AlertChannel, LoggingAlertChannel

logger = structlog.get_logger(__name__)


class AlertDispatcher:
    """
    Sends critical events to an alert channel without blocking the caller.

    Every send runs on one long-lived background event loop owned by the
    dispatcher, started on the first critical event. The channel and any
    HTTP client it holds are only ever used from that loop. Failures are
    logged and counted, never raised.

    Example:
        dispatcher = AlertDispatcher(WebhookAlertChannel(url))
        event_log = EventLog(on_critical=dispatcher.dispatch)
        ...
        await dispatcher.aclose()
    """

    def __init__(self, channel: Optional[AlertChannel] = None):
        self.channel = channel or LoggingAlertChannel()
        self._lock = threading.Lock()
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._thread: Optional[threading.Thread] = None
        self._pending: Set[concurrent.futures.Future] = set()
        self._sent = 0
        self._failed = 0

    @property
    def stats(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "channel": getattr(self.channel, "name", type(self.channel).__name__),
                "sent": self._sent,
                "failed": self._failed,
                "pending": len(self._pending),
            }

    def dispatch(self, event: SecurityEvent) -> None:
        """Schedule an alert for a critical event and return immediately."""
        if not event.is_critical:
            logger.debug("alert_skipped_non_critical", event_id=event.id)
            return

        try:
            future = asyncio.run_coroutine_threadsafe(self._deliver(event), self._ensure_loop())
        except Exception:
            logger.exception("alert_schedule_failed", event_id=event.id)
            return

        with self._lock:
            self._pending.add(future)
        future.add_done_callback(self._forget)

    def _forget(self, future: concurrent.futures.Future) -> None:
        with self._lock:
            self._pending.discard(future)

    def _ensure_loop(self) -> asyncio.AbstractEventLoop:
        with self._lock:
            if self._loop is None:
                loop = asyncio.new_event_loop()
                thread = threading.Thread(
                    target=self._run_loop,
                    args=(loop,),
                    name="alert-dispatcher",
                    daemon=True,
                )
                thread.start()
                self._loop = loop
                self._thread = thread
            return self._loop

    @staticmethod
    def _run_loop(loop: asyncio.AbstractEventLoop) -> None:
        asyncio.set_event_loop(loop)
        try:
            loop.run_forever()
        finally:
            loop.close()

    async def _deliver(self, event: SecurityEvent) -> None:
        try:
            await self.channel.send(event)
        except Exception as e:
            with self._lock:
                self._failed += 1
            logger.error(
                "alert_dispatch_failed",
                event_id=event.id,
                channel=getattr(self.channel, "name", "unknown"),
                error=str(e),
            )
            return

        with self._lock:
            self._sent += 1
        logger.info("alert_dispatched", event_id=event.id)

    def _pending_futures(self) -> Set[concurrent.futures.Future]:
        with self._lock:
            return set(self._pending)

    async def drain(self) -> None:
        """Wait for every scheduled alert, from async code."""
        pending = self._pending_futures()
        while pending:
            await asyncio.gather(
                *(asyncio.wrap_future(f) for f in pending),
                return_exceptions=True,
            )
            pending = self._pending_futures()

    def join_background(self, timeout: Optional[float] = None) -> None:
        """Wait for every scheduled alert, from synchronous code."""
        concurrent.futures.wait(self._pending_futures(), timeout=timeout)

    async def aclose(self) -> None:
        """Flush pending alerts, close the channel and stop the background loop."""
        await self.drain()

        with self._lock:
            loop, thread = self._loop, self._thread
            self._loop = None
            self._thread = None

        close = getattr(self.channel, "aclose", None)
        if loop is None:
            if close is not None:
                await close()
            return

        if close is not None:
            await asyncio.wrap_future(asyncio.run_coroutine_threadsafe(close(), loop))
        loop.call_soon_threadsafe(loop.stop)
        await asyncio.to_thread(thread.join, 5.0)
