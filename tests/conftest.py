"""Shared pytest fixtures."""

import os
import stat

import pytest

from jps_packager.lib.command import CmdResult
from jps_packager.log_sink import LogSink
from jps_packager.package_config import PackageConfig


class FakeRunner:
    """Stands in for run_cmd. Records argv and what the scripts dir held."""

    def __init__(self, returncode=0, output="", error=None):
        self.returncode = returncode
        self.output = output
        self.error = error
        self.calls = []
        self.scripts_snapshots = []

    def __call__(self, argv):
        argv = list(argv)
        self.calls.append(argv)
        if "--scripts" in argv:
            scripts_dir = argv[argv.index("--scripts") + 1]
            script = os.path.join(scripts_dir, "postinstall")
            with open(script, encoding="utf-8") as f:
                contents = f.read()
            self.scripts_snapshots.append(
                {
                    "scripts_dir": scripts_dir,
                    "names": sorted(os.listdir(scripts_dir)),
                    "contents": contents,
                    "mode": stat.S_IMODE(os.stat(script).st_mode),
                }
            )
        if self.error is not None:
            raise self.error
        return CmdResult(argv=argv, returncode=self.returncode, output=self.output)


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def log_sink():
    return LogSink()


@pytest.fixture
def config(tmp_path):
    """A config whose source and output folders exist."""
    src = tmp_path / "payload"
    out = tmp_path / "out"
    src.mkdir()
    out.mkdir()
    return PackageConfig(source_path=str(src), output_path=str(out))
