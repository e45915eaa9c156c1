"""Parser for the combined ``ss || netstat`` output collected on Linux hosts."""

from __future__ import annotations

from remoteports.parsers.common import unique_by_port
from remoteports.parsers.netstat import parse_netstat_line
from remoteports.parsers.ss import parse_ss_line
from remoteports.schemas.port import RemotePort


def is_header_line(line: str) -> bool:
    return "State" in line or "Proto" in line or line.startswith("Netid")


def parse_linux_line(line: str) -> RemotePort | None:
    """Try the ss layout first, then netstat."""
    if not line or is_header_line(line):
        return None
    return parse_ss_line(line) or parse_netstat_line(line)


def parse_linux_output(output: str) -> list[RemotePort]:
    return unique_by_port(parse_linux_line(line) for line in output.splitlines())
