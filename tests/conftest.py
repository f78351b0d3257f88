import subprocess

import pytest

from fabricweaver.shared.modules.config.settings import WeaverSettings


class FakeRunner:
    """Records CommandSpecs instead of spawning anything."""

    def __init__(self, error=None):
        self.specs = []
        self.error = error

    def run(self, spec):
        self.specs.append(spec)
        if self.error is not None:
            raise self.error
        return subprocess.CompletedProcess(spec.to_subprocess(), 0, "", "")


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def settings(tmp_path):
    return WeaverSettings(install_script=str(tmp_path / "bin" / "install-fabric.sh"))


@pytest.fixture
def make_runner():
    return FakeRunner
