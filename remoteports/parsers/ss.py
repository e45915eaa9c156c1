"""Parser for single lines of ``ss -tlnp`` output.

Example line::

    LISTEN 0      4096       127.0.0.1:3000       0.0.0.0:*    users:(("node",pid=1234,fd=19))
"""

from __future__ import annotations

from remoteports.parsers.common import normalize_address, split_endpoint
from remoteports.schemas.port import RemotePort

_USERS_MARKER = 'users:(("'


def _is_ss_listen_line(columns: list[str]) -> bool:
    # State is column 0, or column 1 when a Netid column precedes it.
    # netstat puts LISTEN in column 5 and is left to the netstat parser.
    return "LISTEN" in columns[:2]


def _extract_process(line: str) -> str | None:
    start = line.find(_USERS_MARKER)
    if start < 0:
        return None
    start += len(_USERS_MARKER)
    end = line.find('"', start)
    if end < 0:
        return None
    return line[start:end] or None


def parse_ss_line(line: str) -> RemotePort | None:
    if "LISTEN" not in line:
        return None

    columns = line.split()
    if not _is_ss_listen_line(columns):
        return None

    # First colon column carrying a valid port is the local side; the peer
    # column ("0.0.0.0:*") comes after it.
    endpoint = None
    for column in columns:
        endpoint = split_endpoint(column)
        if endpoint is not None:
            break
    if endpoint is None:
        return None
    addr, port = endpoint

    return RemotePort(
        port=port,
        process=_extract_process(line),
        address=normalize_address(addr),
    )
