import os
import stat
from unittest import mock

import pytest
import requests

from fabricweaver.installer.fabric_installer import FabricInstaller
from fabricweaver.shared.modules.command.errors import CommandExecutionError, InstallerError


def make_session(content=b"#!/bin/bash\necho install\n", error=None):
    response = mock.Mock()
    response.content = content
    response.raise_for_status.side_effect = error
    session = mock.Mock()
    session.get.return_value = response
    return session


class TestUpdateInstallScript:
    def test_downloads_and_makes_executable(self, settings, runner):
        session = make_session()
        installer = FabricInstaller(settings=settings, runner=runner, session=session)

        path = installer.update_install_script()

        session.get.assert_called_once_with(settings.install_script_url, timeout=settings.download_timeout)
        with open(path, "rb") as f:
            assert f.read() == b"#!/bin/bash\necho install\n"
        assert stat.S_IMODE(os.stat(path).st_mode) == 0o755

    def test_replaces_existing_script(self, settings, runner):
        os.makedirs(os.path.dirname(settings.install_script))
        with open(settings.install_script, "w") as f:
            f.write("old")
        FabricInstaller(settings=settings, runner=runner, session=make_session(b"new")).update_install_script()
        with open(settings.install_script) as f:
            assert f.read() == "new"

    def test_http_error_raises_installer_error(self, settings, runner):
        session = make_session(error=requests.HTTPError("404 Client Error"))
        with pytest.raises(InstallerError):
            FabricInstaller(settings=settings, runner=runner, session=session).update_install_script()
        assert not os.path.exists(settings.install_script)

    def test_connection_error_raises_installer_error(self, settings, runner):
        session = mock.Mock()
        session.get.side_effect = requests.ConnectionError("unreachable")
        with pytest.raises(InstallerError):
            FabricInstaller(settings=settings, runner=runner, session=session).update_install_script()


class TestSetup:
    @pytest.fixture
    def script(self, settings):
        os.makedirs(os.path.dirname(settings.install_script))
        with open(settings.install_script, "w") as f:
            f.write("#!/bin/bash\n")
        return settings.install_script

    def test_missing_script_raises(self, settings, runner):
        with pytest.raises(InstallerError, match="fabricweaver update"):
            FabricInstaller(settings=settings, runner=runner, session=make_session()).setup()
        assert runner.specs == []

    def test_runs_script_per_component(self, settings, runner, script, tmp_path):
        installer = FabricInstaller(settings=settings, runner=runner, session=make_session())
        installer.setup("2.5.9", "1.5.12", ["binary", "docker"], cwd=str(tmp_path))

        assert [s.to_subprocess() for s in runner.specs] == [
            ["bash", script, "binary", "-f", "2.5.9", "-c", "1.5.12"],
            ["bash", script, "docker", "-f", "2.5.9", "-c", "1.5.12"],
        ]
        assert runner.specs[0].cwd == str(tmp_path)

    def test_defaults_come_from_settings(self, settings, runner, script, tmp_path):
        FabricInstaller(settings=settings, runner=runner, session=make_session()).setup(cwd=str(tmp_path))
        assert runner.specs[0].args == [script, "binary", "-f", "2.5.12", "-c", "1.5.15"]

    def test_copies_config_files_to_dest(self, settings, runner, script, tmp_path):
        config = tmp_path / "config"
        config.mkdir()
        (config / "core.yaml").write_text("peer: {}")
        (config / "orderer.yaml").write_text("General: {}")
        (config / "nested").mkdir()
        dest = tmp_path / "network"

        copied = FabricInstaller(settings=settings, runner=runner, session=make_session()).setup(
            dest=str(dest), cwd=str(tmp_path)
        )

        assert sorted(os.path.basename(p) for p in copied) == ["core.yaml", "orderer.yaml"]
        assert (dest / "core.yaml").read_text() == "peer: {}"

    def test_failed_component_raises_installer_error(self, settings, make_runner, script, tmp_path):
        runner = make_runner(error=CommandExecutionError(["bash"], 1))
        with pytest.raises(InstallerError, match="binary"):
            FabricInstaller(settings=settings, runner=runner, session=make_session()).setup(cwd=str(tmp_path))
