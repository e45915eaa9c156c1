"""Helpers shared by the lsof / ss / netstat parsers."""

from __future__ import annotations

from collections.abc import Iterable

from remoteports.schemas.port import MAX_PORT, MIN_PORT, RemotePort

WILDCARD_ADDRESS = "0.0.0.0"

_WILDCARD_FORMS = {"*", "[::]", ""}


def parse_port(text: str) -> int | None:
    """Return ``text`` as a TCP port number, or None if it is not one."""
    if not text.isascii() or not text.isdigit():
        return None
    value = int(text)
    if MIN_PORT <= value <= MAX_PORT:
        return value
    return None


def split_endpoint(field: str) -> tuple[str, int] | None:
    """Split ``addr:port`` at the last colon.

    The port is always the suffix after the final colon, so bracketed and
    bare IPv6 addresses split correctly.
    """
    idx = field.rfind(":")
    if idx < 0:
        return None
    port = parse_port(field[idx + 1:])
    if port is None:
        return None
    return field[:idx], port


def normalize_address(addr: str) -> str:
    """Map wildcard binds to 0.0.0.0 and strip IPv6 brackets."""
    if addr in _WILDCARD_FORMS:
        return WILDCARD_ADDRESS
    return addr.replace("[", "").replace("]", "")


def unique_by_port(records: Iterable[RemotePort | None]) -> list[RemotePort]:
    """Drop empty results and later duplicates of a port, keeping input order."""
    seen: set[int] = set()
    ports: list[RemotePort] = []
    for record in records:
        if record is None or record.port in seen:
            continue
        seen.add(record.port)
        ports.append(record)
    return ports
