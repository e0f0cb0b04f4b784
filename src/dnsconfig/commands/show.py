"""Command: print the configuration resolved from DNS."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dnsconfig.commands._base import DnsCommand, service_options
from dnsconfig.domain.services import Service

if TYPE_CHECKING:
    from dnsconfig.commands._context import AppContext


@click.command(
    cls=DnsCommand,
    examples="""\
  dnsconfig show -s marathon
  dnsconfig show -s mesos-slave -H host1.dc1.example.com
  dnsconfig --json show -s zookeeper""",
)
@service_options
@click.pass_obj
def show(app: AppContext, service: str, hostname: str | None) -> None:
    """Resolve and print the configuration for a service."""
    app.emit(app.service.show(Service(service), hostname))
