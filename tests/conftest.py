"""Shared fixtures: sample spec files written into tmp_path."""

from __future__ import annotations

from pathlib import Path

import pytest

from pyspecfile import ConfigFile

SAMPLE = """\
# global specs
port = 80
name = Robot
hosts = a, "b c", d
flags = 1, TRUE, true, 0, false, no, ""
// old style comment
init = {
move 10 20
wait 5
}

[net]
port\t= 9000
timeout = 2.5
server = "Main Host", 0x1F, 010, yes

[Motion]
speeds = 1.5, -2, 3e2
home =
{
  Goto "Dock A" 0.5
  wait 5
}
"""


def write_spec(path: Path, text: str, encoding: str = "utf-8") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode(encoding))
    return path


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    return write_spec(tmp_path / "sample.cfg", SAMPLE)


@pytest.fixture
def cfg(sample_file: Path) -> ConfigFile:
    ret = ConfigFile(sample_file)
    assert ret.load()
    return ret
