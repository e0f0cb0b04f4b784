"""Derivation rules that rewrite an option while it is merged.

Marathon reads its ZooKeeper state from a different znode than Mesos,
but both are normally declared once in the shared ``.mesos.`` namespace
as ``zk=zk://host:port/mesos``. For Marathon that record provides both
``master`` (the raw Mesos zk URL) and ``zk`` (same ensemble, ``/marathon``
path).

Rules are keyed by ``(service, namespace role, option key)``; anything
without a rule is copied verbatim.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from dnsconfig.domain.services import NamespaceRole, Service

Rule = Callable[[str, Mapping[str, str]], dict[str, str]]

MARATHON_ZK_PATH = "/marathon"


def marathon_zk_path(value: str) -> str:
    """Replace the znode path of a zk URL with ``/marathon``.

    Keeps the first three ``/``-separated segments (scheme, empty,
    authority): ``zk://10.0.0.1:2181/mesos`` -> ``zk://10.0.0.1:2181/marathon``.
    """
    return "/".join(value.split("/")[:3]) + MARATHON_ZK_PATH


def _marathon_from_mesos_zk(value: str, options: Mapping[str, str]) -> dict[str, str]:
    assignments: dict[str, str] = {}
    if "master" not in options:
        assignments["master"] = value
    assignments["zk"] = marathon_zk_path(value)
    return assignments


DERIVATION_RULES: dict[tuple[Service, NamespaceRole, str], Rule] = {
    (Service.MARATHON, NamespaceRole.FAMILY, "zk"): _marathon_from_mesos_zk,
}


def derive_option(
    service: Service,
    role: NamespaceRole,
    key: str,
    value: str,
    options: Mapping[str, str],
) -> dict[str, str]:
    """Return the assignments produced by an option not yet in *options*."""
    rule = DERIVATION_RULES.get((service, role, key))
    if rule is None:
        return {key: value}
    return rule(value, options)
