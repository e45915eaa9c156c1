"""asyncssh-backed RemoteChannel.

Flow:
  1. ``open_channel`` connects with asyncssh using Settings defaults
  2. ``SshChannel.get_remote_platform`` runs ``uname -sm`` once per channel
  3. ``SshChannel.execute_command`` runs shell commands and returns stdout
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import asyncssh

from remoteports.core.channel import ChannelError, RemoteChannel
from remoteports.core.config import get_settings
from remoteports.core.logging import get_logger
from remoteports.schemas.platform import PlatformInfo

logger = get_logger(__name__)

_TRANSPORT_ERRORS = (asyncssh.Error, OSError, asyncio.TimeoutError)


class SshChannel(RemoteChannel):
    """Run commands over an open asyncssh client connection."""

    def __init__(
        self,
        conn: asyncssh.SSHClientConnection,
        *,
        host: str = "",
        command_timeout: float | None = None,
    ) -> None:
        self._conn = conn
        self._host = host
        self._command_timeout = (
            command_timeout if command_timeout is not None
            else get_settings().ssh_command_timeout
        )
        self._platform: PlatformInfo | None = None

    async def execute_command(self, command: str) -> str:
        logger.debug("Running remote command", host=self._host, command=command)
        try:
            result = await self._conn.run(command, check=False, timeout=self._command_timeout)
        except _TRANSPORT_ERRORS as exc:
            logger.warning("Remote command failed", host=self._host, error=str(exc))
            raise ChannelError(f"Command failed on {self._host or 'remote host'}: {exc}") from exc

        stdout = result.stdout or ""
        if isinstance(stdout, bytes):
            stdout = stdout.decode("utf-8", errors="replace")
        return stdout

    async def get_remote_platform(self) -> PlatformInfo:
        if self._platform is None:
            self._platform = _parse_uname(await self.execute_command("uname -sm 2>/dev/null"))
            logger.debug(
                "Detected remote platform",
                host=self._host,
                os=self._platform.os,
                arch=self._platform.arch,
            )
        return self._platform


def _parse_uname(output: str) -> PlatformInfo:
    """Turn ``uname -sm`` output (e.g. "Darwin arm64") into a PlatformInfo."""
    parts = output.split()
    if not parts:
        return PlatformInfo(os="unknown")
    return PlatformInfo(os=parts[0].lower(), arch=parts[1] if len(parts) > 1 else None)


def build_connect_kwargs(
    *,
    port: int | None = None,
    username: str | None = None,
    password: str | None = None,
    private_key: str | None = None,
) -> dict[str, Any]:
    """Build asyncssh connect kwargs from explicit credentials and Settings."""
    settings = get_settings()
    kwargs: dict[str, Any] = {
        "port": port or settings.ssh_port,
        "username": username or settings.ssh_user,
        "connect_timeout": settings.ssh_connect_timeout,
        # None disables host key checking (trust-on-first-use)
        "known_hosts": settings.ssh_known_hosts,
    }
    if password:
        kwargs["password"] = password
    if private_key:
        kwargs["client_keys"] = [asyncssh.import_private_key(private_key)]
    return kwargs


@asynccontextmanager
async def open_channel(
    host: str,
    *,
    port: int | None = None,
    username: str | None = None,
    password: str | None = None,
    private_key: str | None = None,
) -> AsyncIterator[SshChannel]:
    """Connect to ``host`` and yield an SshChannel, closing the connection on exit."""
    kwargs = build_connect_kwargs(
        port=port, username=username, password=password, private_key=private_key
    )
    try:
        conn = await asyncssh.connect(host, **kwargs)
    except _TRANSPORT_ERRORS as exc:
        logger.warning("SSH connection failed", host=host, error=str(exc))
        raise ChannelError(f"Cannot connect to {host}: {exc}") from exc

    async with conn:
        yield SshChannel(conn, host=host)
