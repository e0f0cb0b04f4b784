"""Command: write the resolved configuration to the service's config files."""

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
  dnsconfig write -s mesos-master
  dnsconfig write -s marathon --restart
  dnsconfig --fsprefix /tmp/render write -s zookeeper""",
)
@service_options
@click.option("--restart", is_flag=True, help="Restart the service after writing.")
@click.pass_obj
def write(app: AppContext, service: str, hostname: str | None, restart: bool) -> None:
    """Resolve the configuration and write it to disk."""
    app.emit(app.service.commit(Service(service), hostname, restart=restart))
