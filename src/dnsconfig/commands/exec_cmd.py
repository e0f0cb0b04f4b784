"""Command: run a service in the foreground with its resolved configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dnsconfig.commands._base import DnsCommand, service_options
from dnsconfig.domain.services import Service

if TYPE_CHECKING:
    from dnsconfig.commands._context import AppContext


@click.command(
    "exec",
    cls=DnsCommand,
    examples="""\
  dnsconfig exec -s mesos-slave
  dnsconfig exec -s zookeeper""",
)
@service_options
@click.pass_obj
def exec_cmd(app: AppContext, service: str, hostname: str | None) -> None:
    """Resolve the configuration and run the service in the foreground.

    Mesos and Marathon receive options as ``--key=value`` arguments.
    ZooKeeper is started with ``start-foreground`` and reads zoo.cfg.
    """
    app.emit(app.service.run(Service(service), hostname))
