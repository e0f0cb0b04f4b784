"""Query naming, domain walk, and TXT record line parsing.

Query names follow ``<prefix><namespace-label><separator><domain-suffix>``,
e.g. ``config.mesos._mesosphere.example.com``. Record lines are either
``key=value`` (an option) or a bare ``key`` (a flag).
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from dnsconfig.domain.services import Namespace

DEFAULT_PREFIX = "config"
DEFAULT_SEPARATOR = "_mesosphere."


def domain_suffixes(hostname: str) -> list[str]:
    """Return every domain suffix of *hostname*, most specific first.

    ``host1.dc1.example.com`` yields the full name, ``dc1.example.com``,
    ``example.com`` and ``com``.
    """
    labels = hostname.split(".")
    return [".".join(labels[i:]) for i in range(len(labels))]


@dataclass(frozen=True)
class QueryNaming:
    """How query names are built from namespaces and domain suffixes."""

    prefix: str = DEFAULT_PREFIX
    separator: str = DEFAULT_SEPARATOR

    def query_key(self, namespace: Namespace, suffix: str) -> str:
        return f"{self.prefix}{namespace.label}{self.separator}{suffix}"


def iter_queries(
    naming: QueryNaming,
    namespaces: Sequence[Namespace],
    hostname: str,
) -> Iterator[tuple[str, Namespace, str]]:
    """Yield ``(suffix, namespace, query_key)`` in canonical merge order.

    Outer loop: domain suffixes, most specific first.
    Inner loop: namespaces in priority order.
    """
    for suffix in domain_suffixes(hostname):
        for namespace in namespaces:
            yield suffix, namespace, naming.query_key(namespace, suffix)


# ---------------------------------------------------------------------------
# Record lines
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Flag:
    name: str


@dataclass(frozen=True)
class Option:
    key: str
    value: str


@dataclass(frozen=True)
class Malformed:
    line: str


RecordLine = Flag | Option | Malformed


def parse_record_line(line: str) -> RecordLine:
    """Classify a single TXT record line.

    Splits on the first ``=`` only, so values may contain ``=``.
    Empty lines and lines with an empty key are malformed.
    """
    key, sep, value = line.partition("=")
    if not key:
        return Malformed(line)
    if not sep:
        return Flag(key)
    return Option(key, value)
