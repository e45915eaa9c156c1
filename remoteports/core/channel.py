"""Remote command channel contract consumed by the port scanner."""

from __future__ import annotations

from abc import ABC, abstractmethod

from remoteports.schemas.platform import PlatformInfo


class ChannelError(Exception):
    """The remote channel failed (connection drop, timeout, transport error)."""


class RemoteChannel(ABC):
    """An established command-execution session on a remote host.

    Implementations own connection lifecycle and authentication; the scanner
    only ever asks for the platform and for the stdout of a shell command.
    Both calls raise on channel failure and are never retried by callers.
    """

    @abstractmethod
    async def get_remote_platform(self) -> PlatformInfo:
        ...

    @abstractmethod
    async def execute_command(self, command: str) -> str:
        """Run ``command`` through the remote shell and return captured stdout."""
        ...
