"""CLI commands for listing and killing remote ports."""

from __future__ import annotations

import asyncio
import functools
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from remoteports.cli.output import console, ports_table
from remoteports.core.channel import ChannelError
from remoteports.core.ssh import open_channel
from remoteports.modules.port_scanner import PortScanner, ProcessNotFoundError
from remoteports.schemas.port import PortScanResult


def connection_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Shared SSH options for every command that talks to a host."""

    @click.argument("host")
    @click.option("--ssh-port", type=click.IntRange(1, 65535), default=None,
                  help="SSH port (default: SSH_PORT setting, 22)")
    @click.option("--user", "-u", default=None,
                  help="SSH user (default: SSH_USER setting, root)")
    @click.option("--password", envvar="RPORTS_SSH_PASSWORD", default=None,
                  help="SSH password (or RPORTS_SSH_PASSWORD)")
    @click.option("--key", "key_file", type=click.Path(exists=True, dir_okay=False, path_type=Path),
                  default=None, help="Private key file")
    @functools.wraps(func)
    def wrapper(**kwargs: Any) -> Any:
        key_file: Path | None = kwargs.pop("key_file")
        kwargs["connect"] = functools.partial(
            open_channel,
            kwargs.pop("host"),
            port=kwargs.pop("ssh_port"),
            username=kwargs.pop("user"),
            password=kwargs.pop("password"),
            private_key=key_file.read_text(encoding="utf-8") if key_file else None,
        )
        return func(**kwargs)

    return wrapper


@click.group("ports")
def ports_cmd() -> None:
    """Inspect listening ports on a remote host."""


@ports_cmd.command("list")
@connection_options
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON instead of a table")
def ports_list(connect: Callable[..., Any], as_json: bool) -> None:
    """List listening TCP ports on HOST, common dev servers first."""

    async def _scan() -> PortScanResult:
        async with connect() as channel:
            return await PortScanner(channel).scan()

    try:
        result = asyncio.run(_scan())
    except ChannelError as e:
        console.print(f"[red]SSH error:[/red] {e}")
        raise SystemExit(1)

    if as_json:
        click.echo(json.dumps(result.model_dump(mode="json"), indent=2))
        return

    if not result.tool_available:
        console.print(
            "[yellow]No scanning tool available on the remote host[/yellow] "
            "(tried lsof / ss / netstat)."
        )
        return

    host = connect.args[0]
    console.print(ports_table(host, result.ports))


@ports_cmd.command("kill")
@connection_options
@click.argument("port", type=click.IntRange(1, 65535))
def ports_kill(connect: Callable[..., Any], port: int) -> None:
    """Terminate the process listening on PORT on HOST."""

    async def _kill() -> None:
        async with connect() as channel:
            await PortScanner(channel).kill_process(port)

    try:
        asyncio.run(_kill())
    except ProcessNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
    except ChannelError as e:
        console.print(f"[red]SSH error:[/red] {e}")
        raise SystemExit(1)

    console.print(f"[green]Killed process on port {port}[/green]")
