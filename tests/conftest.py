"""pytest fixtures shared across all tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from structlog.testing import CapturingLogger

from remoteports.core.channel import RemoteChannel
from remoteports.schemas.platform import PlatformInfo


class FakeChannel(RemoteChannel):
    """Scripted RemoteChannel: fixed platform, queued command outputs."""

    def __init__(
        self,
        os: str = "linux",
        outputs: list[str] | None = None,
        platform_error: Exception | None = None,
        command_error: Exception | None = None,
    ) -> None:
        self.os = os
        self.outputs = list(outputs or [])
        self.platform_error = platform_error
        self.command_error = command_error
        self.commands: list[str] = []
        self.platform_calls = 0

    async def get_remote_platform(self) -> PlatformInfo:
        self.platform_calls += 1
        if self.platform_error is not None:
            raise self.platform_error
        return PlatformInfo(os=self.os)

    async def execute_command(self, command: str) -> str:
        self.commands.append(command)
        if self.command_error is not None:
            raise self.command_error
        return self.outputs.pop(0) if self.outputs else ""


@pytest.fixture
def make_channel() -> Callable[..., FakeChannel]:
    return FakeChannel


@pytest.fixture
def capturing_logger() -> CapturingLogger:
    return CapturingLogger()
