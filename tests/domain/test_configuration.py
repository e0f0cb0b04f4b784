"""Tests for ResolvedConfiguration."""

import pytest

from dnsconfig.domain.configuration import ResolvedConfiguration


class TestResolvedConfiguration:
    def test_defaults_empty(self) -> None:
        config = ResolvedConfiguration()
        assert config.options == {}
        assert config.flags == frozenset()
        assert config.empty

    def test_to_args(self) -> None:
        config = ResolvedConfiguration(
            options={"zk": "zk://a/mesos", "quorum": "1"},
            flags=frozenset({"checkpoint"}),
        )
        assert config.to_args() == ["--quorum=1", "--zk=zk://a/mesos", "--checkpoint"]

    def test_to_dict_sorted(self) -> None:
        config = ResolvedConfiguration(options={"b": "2", "a": "1"}, flags=frozenset({"y", "x"}))
        assert config.to_dict() == {"options": {"a": "1", "b": "2"}, "flags": ["x", "y"]}

    def test_frozen(self) -> None:
        config = ResolvedConfiguration()
        with pytest.raises(Exception):
            config.options = {"a": "b"}  # type: ignore[misc]
