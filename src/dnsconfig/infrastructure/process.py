"""Process control for configured services.

Both helpers raise on failure (``OSError`` for a missing binary,
``subprocess.CalledProcessError`` for a non-zero exit); the service
layer turns those into failed results.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

from dnsconfig.domain.configuration import ResolvedConfiguration
from dnsconfig.domain.services import Service

logger = logging.getLogger(__name__)


def restart_service(name: str) -> subprocess.CompletedProcess[str]:
    """Restart *name* through the init system's ``service`` wrapper."""
    logger.debug("restarting %s", name)
    return subprocess.run(
        ["service", name, "restart"],
        capture_output=True,
        text=True,
        check=True,
    )


def run_foreground(argv: Sequence[str]) -> subprocess.CompletedProcess[bytes]:
    """Run *argv* attached to the current terminal until it exits."""
    logger.info("running: %s", " ".join(argv))
    return subprocess.run(list(argv), check=True)


def build_command(
    service: Service,
    config: ResolvedConfiguration,
    *,
    zookeeper_bin: str,
) -> list[str]:
    """Return the argv that runs *service* in the foreground.

    Mesos and Marathon take their configuration as ``--key=value`` and
    ``--flag`` arguments. ZooKeeper reads ``zoo.cfg`` and takes none.
    """
    if service is Service.ZOOKEEPER:
        return [zookeeper_bin, "start-foreground"]
    return [str(service), *config.to_args()]
