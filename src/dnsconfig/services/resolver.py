"""Resolver — concurrent TXT lookups across the domain walk.

One lookup is issued per ``(domain suffix, namespace)`` pair. All lookups
run at once, one worker thread per lookup, and are joined before returning. Each task
hands its ``(query key, records)`` pair back through ``asyncio.gather``,
so the result mapping is built by a single collector.

INVARIANT: A failed lookup never fails the resolution. It only leaves
its query key out of the returned mapping.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor

import dns.exception
import dns.resolver

from dnsconfig.domain.records import QueryNaming, iter_queries
from dnsconfig.domain.services import NamespaceTable, Service

logger = logging.getLogger(__name__)

TxtLookup = Callable[[str], list[str]]


def dns_txt_lookup(*, timeout: float = 2.0, lifetime: float = 5.0) -> TxtLookup:
    """Build a TXT lookup on the system resolver configuration.

    Each TXT record may carry several character strings; they are
    concatenated into one line, as DNS clients conventionally do.
    """

    def _resolver() -> dns.resolver.Resolver:
        r = dns.resolver.Resolver(configure=True)
        r.timeout = timeout
        r.lifetime = lifetime
        return r

    def lookup(name: str) -> list[str]:
        answer = _resolver().resolve(name, "TXT")
        return [
            b"".join(rdata.strings).decode("utf-8", errors="replace") for rdata in answer
        ]

    return lookup


class Resolver:
    """Fetch raw TXT record sets for a service and hostname."""

    def __init__(
        self,
        table: NamespaceTable,
        naming: QueryNaming | None = None,
        lookup: TxtLookup | None = None,
    ) -> None:
        self._table = table
        self._naming = naming or QueryNaming()
        self._lookup = lookup or dns_txt_lookup()

    def query_keys(self, service: Service, hostname: str) -> list[str]:
        """Every query name for *service* at *hostname*, in merge order."""
        return [key for _, _, key in iter_queries(self._naming, self._table[service], hostname)]

    def resolve(self, service: Service, hostname: str) -> dict[str, list[str]]:
        """Look up all query names concurrently and block until all finish."""
        return asyncio.run(self.resolve_async(service, hostname))

    async def resolve_async(self, service: Service, hostname: str) -> dict[str, list[str]]:
        keys = self.query_keys(service, hostname)
        loop = asyncio.get_running_loop()

        # One worker per query name so no lookup waits for a free thread.
        with ThreadPoolExecutor(max_workers=len(keys) or 1) as pool:
            results = await asyncio.gather(*(self._fetch(loop, pool, key) for key in keys))

        records: dict[str, list[str]] = {}
        for key, txt in results:
            if txt:
                records[key] = txt
        logger.debug("resolved %d of %d query names for %s", len(records), len(keys), service)
        return records

    async def _fetch(
        self,
        loop: asyncio.AbstractEventLoop,
        pool: ThreadPoolExecutor,
        key: str,
    ) -> tuple[str, list[str] | None]:
        try:
            txt = await loop.run_in_executor(pool, self._lookup, key)
        except (dns.exception.DNSException, OSError) as exc:
            logger.debug("lookup %s: %s", key, exc)
            return key, None
        logger.debug("lookup %s: found", key)
        return key, list(txt)
