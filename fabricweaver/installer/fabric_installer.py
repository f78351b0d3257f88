import os
import shutil
from typing import List, Optional, Sequence

import requests

from fabricweaver.shared.modules.command.errors import CommandExecutionError, InstallerError
from fabricweaver.shared.modules.command.models.command_spec import CommandSpec
from fabricweaver.shared.modules.config.settings import WeaverSettings
from fabricweaver.shared.modules.log.logger import get_logger
from fabricweaver.shared.modules.process.process_runner import ProcessRunner

SCRIPT_MODE = 0o755
CONFIG_DIR_NAME = "config"


class FabricInstaller:
    """
    Fetches Hyperledger Fabric's install-fabric.sh and runs it to pull
    binaries, images or samples at pinned versions.
    """

    def __init__(self, settings: Optional[WeaverSettings] = None, runner=None, session=None, logger=None):
        self.settings = settings or WeaverSettings.from_env()
        self.logger = logger or get_logger("FabricInstaller")
        self.runner = runner or ProcessRunner(logger=get_logger("ProcessRunner", "install-fabric"))
        self.session = session or requests.Session()

    def update_install_script(self) -> str:
        """
        Download the latest install script, replacing any existing copy.

        Returns:
            str: Path of the script on disk

        Raises:
            InstallerError: If the download fails
        """
        script = self.settings.install_script
        url = self.settings.install_script_url
        self.logger.info(f"📥 Downloading install script from {url}")
        try:
            response = self.session.get(url, timeout=self.settings.download_timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            self.logger.error(f"❌ Failed to download the install script: {e}")
            raise InstallerError(f"Failed to download {url}: {e}") from e

        os.makedirs(os.path.dirname(script) or ".", exist_ok=True)
        if os.path.exists(script):
            self.logger.debug(f"Removing existing script at {script}")
            os.remove(script)
        with open(script, "wb") as f:
            f.write(response.content)
        os.chmod(script, SCRIPT_MODE)
        self.logger.info(f"✅ Install script saved to {script}")
        return script

    def setup(
        self,
        fabric_version: Optional[str] = None,
        ca_version: Optional[str] = None,
        components: Optional[Sequence[str]] = None,
        dest: Optional[str] = None,
        cwd: Optional[str] = None,
    ) -> List[str]:
        """
        Run the install script once per component, then optionally copy the
        generated config/ files into `dest`.

        Returns:
            List[str]: Files copied into dest (empty when dest is None)

        Raises:
            InstallerError: Missing script or a failed component install
        """
        script = self.settings.install_script
        if not os.path.isfile(script):
            raise InstallerError(
                f"Install script not found at {script}. Run `fabricweaver update` first."
            )

        fabric_version = fabric_version or self.settings.fabric_version
        ca_version = ca_version or self.settings.ca_version
        cwd = cwd or os.getcwd()

        for component in components or ["binary"]:
            self.logger.info(f"🔧 Installing {component} (fabric {fabric_version}, ca {ca_version})")
            spec = CommandSpec(
                program="bash",
                args=[script, component, "-f", fabric_version, "-c", ca_version],
                cwd=cwd,
            )
            try:
                self.runner.run(spec)
            except CommandExecutionError as e:
                self.logger.error(f"❌ Failed to install {component}: {e}")
                raise InstallerError(f"Install of {component} failed") from e

        if dest is None:
            return []
        return self.copy_config_files(os.path.join(cwd, CONFIG_DIR_NAME), dest)

    def copy_config_files(self, source: str, dest: str) -> List[str]:
        """Copy the top-level files of `source` into `dest`."""
        if not os.path.isdir(source):
            raise InstallerError(f"Config directory not found: {source}")
        os.makedirs(dest, exist_ok=True)
        copied = []
        for name in sorted(os.listdir(source)):
            path = os.path.join(source, name)
            if not os.path.isfile(path):
                continue
            copied.append(shutil.copy2(path, os.path.join(dest, name)))
        self.logger.info(f"📁 Copied {len(copied)} config files to {dest}")
        return copied
