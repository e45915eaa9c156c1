"""Port scanner module — list and kill listening TCP ports on a remote host.

Discovery runs one platform-specific command chain over the channel
(``lsof`` on macOS, ``ss`` then ``netstat`` elsewhere), parses whichever
output came back and ranks the ports so common dev servers come first.
"""

from __future__ import annotations

from typing import Any

from remoteports.core.channel import RemoteChannel
from remoteports.core.logging import get_logger
from remoteports.core.platforms import (
    KILLED_MARKER,
    SCAN_SENTINEL,
    PlatformProfile,
    get_profile,
    validate_port,
)
from remoteports.schemas.port import PortScanResult, RemotePort


class PortScannerError(Exception):
    """Base class for scanner failures that are not channel failures."""


class ProcessNotFoundError(PortScannerError):
    def __init__(self, port: int) -> None:
        self.port = port
        super().__init__(f"No process found on port {port}")


class PortScanner:
    """Discover and kill listening TCP ports through a RemoteChannel.

    Usage:
        scanner = PortScanner(channel)
        ports = await scanner.list_listening_ports()
        await scanner.kill_process(ports[0].port)

    Channel errors propagate unchanged from every method.
    """

    # Any structlog-style logger: CapturingLogger in tests, a BoundLogger otherwise
    def __init__(self, channel: RemoteChannel, logger: Any | None = None) -> None:
        self._channel = channel
        self._logger = logger if logger is not None else get_logger(__name__)

    async def _profile(self) -> PlatformProfile:
        return get_profile((await self._channel.get_remote_platform()).platform)

    # ── Discovery ────────────────────────────────────────────────────────────

    async def scan(self) -> PortScanResult:
        """Run one discovery pass and report whether a scanning tool was found."""
        profile = await self._profile()

        output = await self._channel.execute_command(profile.scan_command())
        if SCAN_SENTINEL in output:
            self._logger.warning(
                "No port scanning tool available",
                platform=profile.platform.value,
                tools=profile.tool_names(),
            )
            return PortScanResult(platform=profile.platform, status="tool_unavailable")

        ports = sorted(profile.parser(output), key=RemotePort.sort_key)
        self._logger.debug(
            "Found listening ports", platform=profile.platform.value, count=len(ports)
        )
        return PortScanResult(platform=profile.platform, ports=ports)

    async def list_listening_ports(self) -> list[RemotePort]:
        """List listening TCP ports, highest priority first.

        An empty list means either nothing is listening or no scanning tool
        exists on the host; use ``scan`` to tell the two apart.
        """
        return (await self.scan()).ports

    # ── Kill ─────────────────────────────────────────────────────────────────

    async def kill_process(self, port: int) -> None:
        """Send SIGTERM to the process listening on ``port``.

        Raises:
            ValueError: ``port`` is not an int in 1–65535 (nothing is sent).
            ProcessNotFoundError: the remote side reported no owning process.
        """
        validate_port(port)
        profile = await self._profile()
        command = profile.kill_command(port)

        output = (await self._channel.execute_command(command)).strip()
        if output != KILLED_MARKER:
            self._logger.warning(
                "Could not find process on port",
                port=port,
                platform=profile.platform.value,
                output=output,
            )
            raise ProcessNotFoundError(port)

        self._logger.debug("Killed process on port", port=port, platform=profile.platform.value)
