"""Per-platform scan and kill command profiles.

Each remote platform maps to one ``PlatformProfile``: the ordered socket
listing tools to try, the parser that understands their output, and the
kill pipeline. The tools are chained with ``||`` into a single shell
command, so falling back from one tool to the next costs no extra round
trip; when every tool fails the command prints ``SCAN_SENTINEL`` instead.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from remoteports.parsers.linux import parse_linux_output
from remoteports.parsers.lsof import parse_lsof_output
from remoteports.schemas.platform import RemotePlatform
from remoteports.schemas.port import MAX_PORT, MIN_PORT, RemotePort

SCAN_SENTINEL = "SCAN_FAILED"
KILLED_MARKER = "KILLED"
NOT_FOUND_MARKER = "NOT_FOUND"


@dataclass(frozen=True)
class ScanTool:
    name: str       # Binary name, for logs
    command: str    # Full invocation, without stderr redirection


@dataclass(frozen=True)
class PlatformProfile:
    platform: RemotePlatform
    tools: tuple[ScanTool, ...]
    parser: Callable[[str], list[RemotePort]]
    pid_lookup: str
    """Shell snippet printing the owning pid(s) of ``{port}`` on stdout."""

    def scan_command(self) -> str:
        chain = [f"{tool.command} 2>/dev/null" for tool in self.tools]
        chain.append(f"echo '{SCAN_SENTINEL}'")
        return " || ".join(chain)

    def kill_command(self, port: int) -> str:
        """Build the kill pipeline for ``port``.

        Raises:
            ValueError: if ``port`` is not an int in the TCP port range. The
                value is formatted straight into a shell command, so nothing
                else may get through.
        """
        validate_port(port)
        lookup = self.pid_lookup.format(port=port)
        return (
            f"pid=$({lookup}) && "
            f'[ -n "$pid" ] && kill $pid && echo "{KILLED_MARKER}" || echo "{NOT_FOUND_MARKER}"'
        )

    def tool_names(self) -> list[str]:
        return [tool.name for tool in self.tools]


def validate_port(port: object) -> int:
    # bool is an int subclass; True would otherwise format as "True"
    if not isinstance(port, int) or isinstance(port, bool):
        raise ValueError(f"Port must be an integer, got {type(port).__name__}")
    if not MIN_PORT <= port <= MAX_PORT:
        raise ValueError(f"Port must be between {MIN_PORT} and {MAX_PORT}, got {port}")
    return port


DARWIN_PROFILE = PlatformProfile(
    platform=RemotePlatform.DARWIN,
    tools=(ScanTool(name="lsof", command="lsof -iTCP -sTCP:LISTEN -P -n"),),
    parser=parse_lsof_output,
    pid_lookup="lsof -ti tcp:{port} 2>/dev/null | head -1",
)

LINUX_PROFILE = PlatformProfile(
    platform=RemotePlatform.LINUX_LIKE,
    tools=(
        ScanTool(name="ss", command="ss -tlnp"),
        ScanTool(name="netstat", command="netstat -tlnp"),
    ),
    parser=parse_linux_output,
    # fuser prints "8080/tcp:" on stderr and the pids on stdout
    pid_lookup="fuser {port}/tcp 2>/dev/null | awk '{{print $1}}'",
)

_PROFILES: dict[RemotePlatform, PlatformProfile] = {
    RemotePlatform.DARWIN: DARWIN_PROFILE,
    RemotePlatform.LINUX_LIKE: LINUX_PROFILE,
}


def get_profile(platform: RemotePlatform) -> PlatformProfile:
    return _PROFILES[platform]
