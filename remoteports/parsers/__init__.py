"""Parsers turning socket-listing tool output into RemotePort records."""

from remoteports.parsers.linux import parse_linux_output
from remoteports.parsers.lsof import parse_lsof_output

__all__ = ["parse_linux_output", "parse_lsof_output"]
