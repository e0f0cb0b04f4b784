"""Tests for configuration file sinks."""

from __future__ import annotations

import stat
from pathlib import Path

import pytest

from dnsconfig.infrastructure.filesystem import (
    TEMP_PREFIX,
    render_zoocfg,
    rooted,
    write_config_file,
    write_mesos_config,
    write_zookeeper_config,
)


class TestWriteConfigFile:
    def test_writes_with_mode(self, tmp_path: Path) -> None:
        path = write_config_file(tmp_path, "quorum", "2\n")
        assert path == tmp_path / "quorum"
        assert path.read_text() == "2\n"
        assert stat.S_IMODE(path.stat().st_mode) == 0o644

    def test_replaces_existing(self, tmp_path: Path) -> None:
        (tmp_path / "quorum").write_text("1\n")
        write_config_file(tmp_path, "quorum", "3\n")
        assert (tmp_path / "quorum").read_text() == "3\n"

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        write_config_file(tmp_path, "a", "x")
        assert not list(tmp_path.glob(f"{TEMP_PREFIX}*"))

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            write_config_file(tmp_path / "missing", "a", "x")


class TestRooted:
    def test_no_prefix(self) -> None:
        assert rooted("", "/etc/mesos-master/") == Path("/etc/mesos-master")

    def test_prefix(self, tmp_path: Path) -> None:
        assert rooted(str(tmp_path), "/etc/marathon/conf/") == tmp_path / "etc" / "marathon" / "conf"


class TestMesosLayout:
    def test_options_and_flags(self, tmp_path: Path) -> None:
        out = tmp_path / "etc" / "mesos-slave"
        written = write_mesos_config(
            out,
            {"work_dir": "/srv/mesos", "isolation": "cgroups/cpu,cgroups/mem"},
            ["checkpoint"],
        )
        assert sorted(p.name for p in written) == ["?checkpoint", "isolation", "work_dir"]
        assert (out / "work_dir").read_text() == "/srv/mesos\n"
        assert (out / "isolation").read_text() == "cgroups/cpu,cgroups/mem\n"
        assert (out / "?checkpoint").read_text() == ""

    def test_empty_configuration_creates_directory(self, tmp_path: Path) -> None:
        out = tmp_path / "conf"
        assert write_mesos_config(out, {}, []) == []
        assert out.is_dir()


class TestZookeeperLayout:
    def test_render_sorted_without_myid(self) -> None:
        options = {"myid": "3", "tickTime": "2000", "dataDir": "/var/lib/zk"}
        assert render_zoocfg(options) == "dataDir=/var/lib/zk\ntickTime=2000\n"

    def test_myid_and_zoocfg_split(self, tmp_path: Path) -> None:
        myid_dir = tmp_path / "var" / "lib" / "zookeeper"
        conf_dir = tmp_path / "etc" / "zookeeper" / "conf"
        options = {"myid": "3", "tickTime": "2000", "dataDir": "/var/lib/zk"}
        write_zookeeper_config(myid_dir, conf_dir, options)
        assert (myid_dir / "myid").read_text() == "3\n"
        assert (conf_dir / "zoo.cfg").read_text() == "dataDir=/var/lib/zk\ntickTime=2000\n"
        assert not (conf_dir / "myid").exists()

    def test_only_myid_skips_zoocfg(self, tmp_path: Path) -> None:
        written = write_zookeeper_config(tmp_path / "data", tmp_path / "conf", {"myid": "1"})
        assert [p.name for p in written] == ["myid"]
        assert not (tmp_path / "conf" / "zoo.cfg").exists()

    def test_without_myid(self, tmp_path: Path) -> None:
        written = write_zookeeper_config(tmp_path / "data", tmp_path / "conf", {"initLimit": "10"})
        assert [p.name for p in written] == ["zoo.cfg"]
        assert not (tmp_path / "data" / "myid").exists()
