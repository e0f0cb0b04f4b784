"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, dnsconfig.toml only contains
overrides. A stock host needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel

from dnsconfig.domain.records import DEFAULT_PREFIX, DEFAULT_SEPARATOR


class DnsConfig(BaseModel):
    """[dns] section."""

    model_config = {"frozen": True}

    prefix: str = DEFAULT_PREFIX
    separator: str = DEFAULT_SEPARATOR
    # Per-nameserver timeout and total budget for one TXT lookup, seconds.
    timeout: float = 2.0
    lifetime: float = 5.0


class PathsConfig(BaseModel):
    """[paths] section.

    ``fsprefix`` is prepended to every output directory, which allows
    rendering a configuration tree outside of ``/``.
    """

    model_config = {"frozen": True}

    fsprefix: str = ""
    mesos_master: str = "/etc/mesos-master/"
    mesos_slave: str = "/etc/mesos-slave/"
    marathon: str = "/etc/marathon/conf/"
    zookeeper_myid: str = "/var/lib/zookeeper/"
    zookeeper_conf: str = "/etc/zookeeper/conf/"


class ExecConfig(BaseModel):
    """[exec] section."""

    model_config = {"frozen": True}

    zookeeper_bin: str = "/usr/share/zookeeper/bin/zkServer.sh"
