"""Merger — fold raw TXT record sets into options and flags.

Records are visited in canonical order: domain suffixes most specific
first, then namespaces in priority order. The first value seen for an
option wins, so a host record overrides a domain-wide default and a
service namespace overrides the shared family namespace.

INVARIANT: The result depends only on the records mapping, never on the
order in which lookups completed.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from dnsconfig.domain.configuration import ResolvedConfiguration
from dnsconfig.domain.derivation import derive_option
from dnsconfig.domain.records import (
    Flag,
    Malformed,
    Option,
    QueryNaming,
    iter_queries,
    parse_record_line,
)
from dnsconfig.domain.services import NamespaceRole, NamespaceTable, Service

logger = logging.getLogger(__name__)


class Merger:
    """Apply first-write-wins and derivation rules over resolved records."""

    def __init__(self, table: NamespaceTable, naming: QueryNaming | None = None) -> None:
        self._table = table
        self._naming = naming or QueryNaming()

    def merge(
        self,
        service: Service,
        hostname: str,
        records: Mapping[str, Sequence[str]],
    ) -> ResolvedConfiguration:
        options: dict[str, str] = {}
        flags: set[str] = set()

        for _suffix, namespace, key in iter_queries(
            self._naming, self._table[service], hostname
        ):
            for line in records.get(key, ()):
                parsed = parse_record_line(line)

                if isinstance(parsed, Malformed):
                    logger.debug("%s: skipping malformed record %r", key, parsed.line)
                elif isinstance(parsed, Flag):
                    logger.debug("%s: enabling %s", key, parsed.name)
                    flags.add(parsed.name)
                elif isinstance(parsed, Option):
                    self._assign(service, namespace.role, key, parsed, options)

        return ResolvedConfiguration(options=options, flags=frozenset(flags))

    def _assign(
        self,
        service: Service,
        role: NamespaceRole,
        key: str,
        option: Option,
        options: dict[str, str],
    ) -> None:
        current = options.get(option.key)
        if current is not None:
            logger.debug(
                "option %s is already defined as %s, not overwriting with %s",
                option.key,
                current,
                option.value,
            )
            return

        for name, value in derive_option(service, role, option.key, option.value, options).items():
            if name in options:
                logger.debug("%s: derived %s already defined, keeping %s", key, name, options[name])
                continue
            if name != option.key or value != option.value:
                logger.debug("%s: deriving %s => %s from %s", key, name, value, option.value)
            else:
                logger.debug("%s: found %s => %s", key, name, value)
            options[name] = value
