"""Rich output helpers for port listings."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from remoteports.schemas.port import RemotePort

console = Console()


def priority_style(priority: int) -> str:
    return {
        0: "green",
        1: "cyan",
    }.get(priority, "dim")


def priority_label(priority: int) -> str:
    return {
        0: "dev port",
        1: "dev tool",
    }.get(priority, "other")


def ports_table(host: str, ports: list[RemotePort]) -> Table:
    table = Table(
        title=f"Listening ports on {host} ({len(ports)})",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
        show_lines=False,
    )
    table.add_column("Port", justify="right", style="bold", no_wrap=True)
    table.add_column("Address", no_wrap=True)
    table.add_column("Process")
    table.add_column("Priority")

    for p in ports:
        table.add_row(
            str(p.port),
            p.address,
            p.process or "—",
            Text(priority_label(p.sort_priority), style=priority_style(p.sort_priority)),
        )
    return table
