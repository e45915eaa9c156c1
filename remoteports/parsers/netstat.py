"""Parser for single lines of ``netstat -tlnp`` output.

Example line::

    tcp        0      0 127.0.0.1:3000          0.0.0.0:*               LISTEN      1234/node
"""

from __future__ import annotations

from remoteports.parsers.common import WILDCARD_ADDRESS, split_endpoint
from remoteports.schemas.port import RemotePort

_LOCAL_ADDRESS_COLUMN = 3


def parse_netstat_line(line: str) -> RemotePort | None:
    if not line.startswith("tcp") or "LISTEN" not in line:
        return None

    columns = line.split()
    if len(columns) <= _LOCAL_ADDRESS_COLUMN:
        return None

    endpoint = split_endpoint(columns[_LOCAL_ADDRESS_COLUMN])
    if endpoint is None:
        return None
    addr, port = endpoint
    address = WILDCARD_ADDRESS if addr in ("0.0.0.0", "::") else addr

    # PID/Program name, "-" when the caller can't see other users' processes
    process = None
    last = columns[-1]
    if "/" in last:
        process = last.split("/", 1)[1] or None

    return RemotePort(port=port, process=process, address=address)
