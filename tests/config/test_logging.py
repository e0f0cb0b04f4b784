"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from dnsconfig.config.logging import QUIET_LOGGERS, configure_logging, resolution_context


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("dnsconfig")
    app_level = app.level
    quiet_levels = {name: logging.getLogger(name).level for name in QUIET_LOGGERS}
    yield
    for name, level in quiet_levels.items():
        logging.getLogger(name).setLevel(level)
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("dnsconfig").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("dnsconfig").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("dnsconfig.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "dnsconfig.test"
        assert "timestamp" in parsed

    def test_resolver_debug_records(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("dnsconfig.services.merger").debug("option %s is already defined", "zk")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "option zk is already defined"
        assert parsed["level"] == "debug"

    def test_debug_hidden_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("dnsconfig.services.resolver").debug("lookup failed")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("dns").debug("wire noise")
        logging.getLogger("asyncio").debug("Using selector: EpollSelector")
        assert capfd.readouterr().err == ""


class TestResolutionContext:
    def test_binds_service_and_hostname(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        with resolution_context("marathon", "host1.dc1.example.com"):
            logging.getLogger("dnsconfig.services.resolver").debug("lookup failed")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["service"] == "marathon"
        assert parsed["hostname"] == "host1.dc1.example.com"

    def test_unbound_after_block(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        with resolution_context("zookeeper", "zk1.example.com"):
            pass
        structlog.get_logger("dnsconfig.test").warning("after")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert "service" not in parsed

    def test_merge_conflicts_carry_context(
        self, capfd: pytest.CaptureFixture[str], settings, make_resolver
    ) -> None:
        from dnsconfig.domain.services import Service
        from dnsconfig.services.configure import ConfigService

        resolver, _ = make_resolver(
            {
                "config.mesos._mesosphere.dc1.example.com": ["quorum=2"],
                "config.mesos._mesosphere.example.com": ["quorum=3"],
            }
        )
        configure_logging(verbose=True, log_json=True)
        ConfigService(settings, resolver=resolver).find_config(
            Service.MESOS_MASTER, "m1.dc1.example.com"
        )
        events = [json.loads(line) for line in capfd.readouterr().err.splitlines() if line]
        conflicts = [e for e in events if "already defined" in e["event"]]
        assert len(conflicts) == 1
        assert conflicts[0]["service"] == "mesos-master"
        assert conflicts[0]["hostname"] == "m1.dc1.example.com"
