"""ConfigService — resolve, merge, and hand the result to a sink.

Resolution itself never fails; the only failures reported here come
from writing files and running processes.
"""

from __future__ import annotations

import logging
import socket
import subprocess
from pathlib import Path

from dnsconfig.config.logging import resolution_context
from dnsconfig.config.settings import DnsConfigSettings
from dnsconfig.domain.configuration import ResolvedConfiguration
from dnsconfig.domain.records import QueryNaming
from dnsconfig.domain.services import Service, build_namespace_table
from dnsconfig.infrastructure.filesystem import (
    rooted,
    write_mesos_config,
    write_zookeeper_config,
)
from dnsconfig.infrastructure.process import build_command, restart_service, run_foreground
from dnsconfig.services.merger import Merger
from dnsconfig.services.resolver import Resolver, dns_txt_lookup
from dnsconfig.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def default_hostname(hostname: str | None = None) -> str:
    """Return *hostname*, or the local system hostname when unset."""
    if hostname:
        return hostname
    return socket.gethostname()


class ConfigService:
    """Operations behind the ``show``, ``write`` and ``exec`` commands.

    Usage::

        svc = ConfigService(settings)
        result = svc.commit(Service.MARATHON, "host1.dc1.example.com")
    """

    def __init__(
        self,
        settings: DnsConfigSettings,
        *,
        resolver: Resolver | None = None,
        merger: Merger | None = None,
    ) -> None:
        self._settings = settings
        table = build_namespace_table()
        naming = QueryNaming(prefix=settings.dns.prefix, separator=settings.dns.separator)
        self._resolver = resolver or Resolver(
            table,
            naming,
            dns_txt_lookup(timeout=settings.dns.timeout, lifetime=settings.dns.lifetime),
        )
        self._merger = merger or Merger(table, naming)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def find_config(self, service: Service, hostname: str) -> ResolvedConfiguration:
        with resolution_context(str(service), hostname):
            records = self._resolver.resolve(service, hostname)
            return self._merger.merge(service, hostname, records)

    def show(self, service: Service, hostname: str | None = None) -> ServiceResult:
        hostname = default_hostname(hostname)
        logger.debug("using hostname %s", hostname)
        config = self.find_config(service, hostname)
        warnings = [] if not config.empty else [f"No configuration found for {service}"]
        return ServiceResult(
            ok=True,
            op="show",
            data={"service": str(service), "hostname": hostname, **config.to_dict()},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Sinks
    # ------------------------------------------------------------------

    def mesos_directory(self, service: Service) -> Path:
        paths = self._settings.paths
        directories = {
            Service.MESOS_MASTER: paths.mesos_master,
            Service.MESOS_SLAVE: paths.mesos_slave,
            Service.MARATHON: paths.marathon,
        }
        return rooted(paths.fsprefix, directories[service])

    def write(self, service: Service, config: ResolvedConfiguration) -> list[Path]:
        """Write *config* through the sink for *service*. Raises ``OSError``."""
        paths = self._settings.paths
        if service is Service.ZOOKEEPER:
            return write_zookeeper_config(
                rooted(paths.fsprefix, paths.zookeeper_myid),
                rooted(paths.fsprefix, paths.zookeeper_conf),
                config.options,
            )
        return write_mesos_config(self.mesos_directory(service), config.options, config.flags)

    def commit(
        self,
        service: Service,
        hostname: str | None = None,
        *,
        restart: bool = False,
    ) -> ServiceResult:
        hostname = default_hostname(hostname)
        logger.debug("using hostname %s", hostname)
        config = self.find_config(service, hostname)

        try:
            written = self.write(service, config)
        except OSError as exc:
            return ServiceResult(
                ok=False,
                op="commit",
                error=ServiceError(
                    code="WRITE_FAILED",
                    message=f"Cannot write {service} configuration: {exc}",
                    detail={"service": str(service)},
                ),
            )

        data = {
            "service": str(service),
            "hostname": hostname,
            "files": [str(p) for p in written],
            "restarted": False,
        }
        if restart:
            try:
                restart_service(str(service))
            except (OSError, subprocess.CalledProcessError) as exc:
                # `service` reports most failures on stderr.
                output = (getattr(exc, "stdout", None) or "") + (getattr(exc, "stderr", None) or "")
                return ServiceResult(
                    ok=False,
                    op="commit",
                    error=ServiceError(
                        code="RESTART_FAILED",
                        message=f"Cannot restart {service}: {exc}",
                        detail={"service": str(service), "output": output},
                    ),
                )
            data["restarted"] = True

        return ServiceResult(ok=True, op="commit", data=data)

    # ------------------------------------------------------------------
    # Foreground execution
    # ------------------------------------------------------------------

    def run(self, service: Service, hostname: str | None = None) -> ServiceResult:
        hostname = default_hostname(hostname)
        logger.debug("using hostname %s", hostname)
        config = self.find_config(service, hostname)
        argv = build_command(service, config, zookeeper_bin=self._settings.exec.zookeeper_bin)

        try:
            completed = run_foreground(argv)
        except (OSError, subprocess.CalledProcessError) as exc:
            return ServiceResult(
                ok=False,
                op="run",
                error=ServiceError(
                    code="EXEC_FAILED",
                    message=f"{argv[0]} failed: {exc}",
                    detail={"argv": argv},
                ),
            )
        return ServiceResult(
            ok=True,
            op="run",
            data={"service": str(service), "argv": argv, "returncode": completed.returncode},
        )
