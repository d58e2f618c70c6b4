import asyncio
from datetime import datetime, timedelta, timezone
from typing import List

import pytest

from authsec_core.events.models import SecurityEvent


class FakeClock:
    """Manually advanced UTC clock."""

    def __init__(self, start: datetime = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class RecordingChannel:
    name = "recording"

    def __init__(self):
        self.events: List[SecurityEvent] = []

    async def send(self, event: SecurityEvent) -> None:
        await asyncio.sleep(0)
        self.events.append(event)


class FailingChannel:
    name = "failing"

    def __init__(self):
        self.calls = 0

    async def send(self, event: SecurityEvent) -> None:
        self.calls += 1
        raise RuntimeError("notification backend down")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def recording_channel():
    return RecordingChannel()


@pytest.fixture
def failing_channel():
    return FailingChannel()
