"""remoteports CLI entry point — `rports` command group."""

from __future__ import annotations

import click

from remoteports.cli.commands.ports import ports_cmd


@click.group()
@click.version_option(package_name="remoteports")
def cli() -> None:
    """remoteports — Find and kill listening TCP ports on a remote host over SSH.

    \b
    Quick start:
      rports ports list dev.example.com --user deploy
      rports ports kill dev.example.com 3000 --user deploy
    """


# Register sub-commands
cli.add_command(ports_cmd)


if __name__ == "__main__":
    cli()
