"""Service identifiers and their namespace priority lists.

Each service queries its own namespace first, then the namespaces it
shares with its family. The table is built once at startup and passed
explicitly to the resolver and merger.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType


class Service(StrEnum):
    """Services that can be configured from DNS."""

    MESOS_MASTER = "mesos-master"
    MESOS_SLAVE = "mesos-slave"
    MARATHON = "marathon"
    ZOOKEEPER = "zookeeper"


class NamespaceRole(StrEnum):
    """Scope a namespace label covers."""

    SERVICE = "service"
    FAMILY = "family"


@dataclass(frozen=True)
class Namespace:
    """A DNS label scoping configuration records, e.g. ``.mesos.``."""

    label: str
    role: NamespaceRole


MESOS_FAMILY = Namespace(".mesos.", NamespaceRole.FAMILY)


class NamespaceTable(Mapping[Service, tuple[Namespace, ...]]):
    """Immutable mapping of service to its ordered namespace list.

    Earlier namespaces take precedence over later ones.
    """

    def __init__(self, entries: Mapping[Service, tuple[Namespace, ...]]) -> None:
        self._entries = MappingProxyType(dict(entries))

    def __getitem__(self, service: Service) -> tuple[Namespace, ...]:
        return self._entries[service]

    def __iter__(self) -> Iterator[Service]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def build_namespace_table() -> NamespaceTable:
    """Return the namespace priority lists for every known service."""
    return NamespaceTable(
        {
            Service.MESOS_MASTER: (
                Namespace(".mesos-master.", NamespaceRole.SERVICE),
                MESOS_FAMILY,
            ),
            Service.MESOS_SLAVE: (
                Namespace(".mesos-slave.", NamespaceRole.SERVICE),
                MESOS_FAMILY,
            ),
            Service.MARATHON: (
                Namespace(".marathon.", NamespaceRole.SERVICE),
                MESOS_FAMILY,
            ),
            Service.ZOOKEEPER: (Namespace(".zookeeper.", NamespaceRole.SERVICE),),
        }
    )
