"""Shared pytest fixtures and test helpers for dnsconfig tests."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path

import dns.resolver
import pytest
from click.testing import CliRunner

from dnsconfig.config.settings import DnsConfigSettings
from dnsconfig.domain.records import QueryNaming
from dnsconfig.domain.services import NamespaceTable, build_namespace_table
from dnsconfig.services.merger import Merger
from dnsconfig.services.resolver import Resolver


class FakeLookup:
    """TXT lookup backed by a dict; unknown names raise NXDOMAIN."""

    def __init__(self, zone: Mapping[str, Sequence[str]]) -> None:
        self.zone = {name: list(txt) for name, txt in zone.items()}
        self.queried: list[str] = []

    def __call__(self, name: str) -> list[str]:
        self.queried.append(name)
        if name not in self.zone:
            raise dns.resolver.NXDOMAIN()
        return list(self.zone[name])


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer machine settings out of the tests."""
    monkeypatch.delenv("DNSCONFIG_CONFIG", raising=False)
    monkeypatch.setattr("dnsconfig.config.discovery.SYSTEM_CONFIG", Path("/nonexistent/dnsconfig.toml"))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def table() -> NamespaceTable:
    return build_namespace_table()


@pytest.fixture
def naming() -> QueryNaming:
    return QueryNaming()


@pytest.fixture
def merger(table: NamespaceTable, naming: QueryNaming) -> Merger:
    return Merger(table, naming)


@pytest.fixture
def make_resolver(table: NamespaceTable, naming: QueryNaming):
    """Build a Resolver over a fake zone."""

    def _make(zone: Mapping[str, Sequence[str]]) -> tuple[Resolver, FakeLookup]:
        lookup = FakeLookup(zone)
        return Resolver(table, naming, lookup), lookup

    return _make


@pytest.fixture
def settings(tmp_path: Path) -> DnsConfigSettings:
    """Settings rendering all output under a temporary root."""
    return DnsConfigSettings.from_cli(search_from=tmp_path, fsprefix=str(tmp_path / "root"))


@pytest.fixture
def fake_dns(monkeypatch: pytest.MonkeyPatch):
    """Route the default DNS lookup used by the CLI through a fake zone."""

    def _install(zone: Mapping[str, Sequence[str]]) -> FakeLookup:
        lookup = FakeLookup(zone)
        monkeypatch.setattr(
            "dnsconfig.services.configure.dns_txt_lookup", lambda **_kwargs: lookup
        )
        return lookup

    return _install
