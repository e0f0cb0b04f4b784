"""Configuration file sinks.

Two layouts:
- Mesos/Marathon: one file per option (``<dir>/<key>`` holding the value)
  and an empty ``<dir>/?<flag>`` marker per flag, as read by the Mesos
  init wrappers.
- ZooKeeper: ``myid`` in the data directory and every other option as a
  sorted ``key=value`` line in ``zoo.cfg``.

INVARIANT: Files are replaced atomically. A reader never sees a partially
written file.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterable, Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

TEMP_PREFIX = ".mesospherednsconfig"
FILE_MODE = 0o644
DIR_MODE = 0o755
FLAG_MARKER = "?"
MYID_OPTION = "myid"
ZOOCFG_FILENAME = "zoo.cfg"


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def write_config_file(directory: Path, name: str, data: str) -> Path:
    """Atomically write *data* to ``directory / name`` with mode 0644."""
    target = directory / name
    logger.debug("writing %s", target)

    fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=TEMP_PREFIX)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(data)
        os.chmod(tmp_name, FILE_MODE)
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return target


def ensure_directory(directory: Path) -> Path:
    directory.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    return directory


def rooted(fsprefix: str, directory: str) -> Path:
    """Place *directory* under *fsprefix*; an empty prefix leaves it as is."""
    if not fsprefix:
        return Path(directory)
    return Path(fsprefix) / directory.lstrip("/")


# ---------------------------------------------------------------------------
# Layouts
# ---------------------------------------------------------------------------


def write_mesos_config(
    directory: Path,
    options: Mapping[str, str],
    flags: Iterable[str],
) -> list[Path]:
    """Write one file per option and one empty marker file per flag."""
    ensure_directory(directory)
    written: list[Path] = []

    for option, value in sorted(options.items()):
        logger.info("option: %s=%s", option, value)
        written.append(write_config_file(directory, option, value + "\n"))

    for flag in sorted(flags):
        logger.info("flag: %s", flag)
        written.append(write_config_file(directory, FLAG_MARKER + flag, ""))

    return written


def render_zoocfg(options: Mapping[str, str]) -> str:
    """Render every option except ``myid`` as sorted ``key=value`` lines."""
    return "".join(
        f"{key}={value}\n" for key, value in sorted(options.items()) if key != MYID_OPTION
    )


def write_zookeeper_config(
    myid_dir: Path,
    zoocfg_dir: Path,
    options: Mapping[str, str],
) -> list[Path]:
    """Write ``myid`` and ``zoo.cfg``; ``zoo.cfg`` only when it has content."""
    ensure_directory(myid_dir)
    ensure_directory(zoocfg_dir)
    written: list[Path] = []

    if MYID_OPTION in options:
        logger.info("option: %s=%s", MYID_OPTION, options[MYID_OPTION])
        written.append(write_config_file(myid_dir, MYID_OPTION, options[MYID_OPTION] + "\n"))

    zoocfg = render_zoocfg(options)
    if zoocfg:
        written.append(write_config_file(zoocfg_dir, ZOOCFG_FILENAME, zoocfg))

    return written
