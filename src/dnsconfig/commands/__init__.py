"""Subcommand modules for dnsconfig.

Provides register_commands() which uses deferred imports to keep
``dnsconfig --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from dnsconfig.commands.exec_cmd import exec_cmd
    from dnsconfig.commands.show import show
    from dnsconfig.commands.write import write

    cli.add_command(show)
    cli.add_command(write)
    cli.add_command(exec_cmd)
