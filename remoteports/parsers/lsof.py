"""Parser for ``lsof -iTCP -sTCP:LISTEN -P -n`` output (macOS).

Example line::

    node    12345   user   23u  IPv4 0x1a2b3c      0t0  TCP 127.0.0.1:3000 (LISTEN)
"""

from __future__ import annotations

from remoteports.parsers.common import normalize_address, split_endpoint, unique_by_port
from remoteports.schemas.port import RemotePort

# COMMAND PID USER FD TYPE DEVICE SIZE/OFF NODE NAME
_MIN_COLUMNS = 9


def parse_lsof_line(line: str) -> RemotePort | None:
    if line.startswith("COMMAND"):
        return None
    if "(LISTEN)" not in line:
        return None

    columns = line.split()
    if len(columns) < _MIN_COLUMNS:
        return None

    process = columns[0]

    # DEVICE is a hex id like 0x1a2b3c, so skip 0x-prefixed columns
    name = next((c for c in columns if ":" in c and not c.startswith("0x")), None)
    if name is None:
        return None

    endpoint = split_endpoint(name)
    if endpoint is None:
        return None
    addr, port = endpoint

    return RemotePort(port=port, process=process, address=normalize_address(addr))


def parse_lsof_output(output: str) -> list[RemotePort]:
    return unique_by_port(parse_lsof_line(line) for line in output.splitlines())
