import os
from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_INSTALL_SCRIPT_URL = (
    "https://raw.githubusercontent.com/hyperledger/fabric/main/scripts/install-fabric.sh"
)
DEFAULT_FABRIC_VERSION = "2.5.12"
DEFAULT_CA_VERSION = "1.5.15"


def _default_install_script() -> str:
    return os.path.join(os.getcwd(), "bin", "install-fabric.sh")


class WeaverSettings(BaseModel):
    """
    Runtime configuration, read from the environment.

    FABRIC_BIN_DIR          directory holding the Fabric binaries (default: resolve from PATH)
    FABRIC_INSTALL_SCRIPT   where install-fabric.sh is stored
    FABRIC_INSTALL_SCRIPT_URL
    FABRIC_VERSION / FABRIC_CA_VERSION   versions passed to the install script
    FABRICWEAVER_LOG_LEVEL
    FABRIC_DOWNLOAD_TIMEOUT seconds
    """
    fabric_bin_dir: Optional[str] = None
    install_script: str = Field(default_factory=_default_install_script)
    install_script_url: str = DEFAULT_INSTALL_SCRIPT_URL
    fabric_version: str = DEFAULT_FABRIC_VERSION
    ca_version: str = DEFAULT_CA_VERSION
    log_level: str = "INFO"
    download_timeout: float = Field(30.0, gt=0)

    @classmethod
    def from_env(cls) -> "WeaverSettings":
        values = {
            "fabric_bin_dir": os.environ.get("FABRIC_BIN_DIR") or None,
            "install_script": os.environ.get("FABRIC_INSTALL_SCRIPT"),
            "install_script_url": os.environ.get("FABRIC_INSTALL_SCRIPT_URL"),
            "fabric_version": os.environ.get("FABRIC_VERSION"),
            "ca_version": os.environ.get("FABRIC_CA_VERSION"),
            "log_level": os.environ.get("FABRICWEAVER_LOG_LEVEL"),
            "download_timeout": os.environ.get("FABRIC_DOWNLOAD_TIMEOUT"),
        }
        return cls(**{k: v for k, v in values.items() if v is not None})

    def resolve_binary(self, binary: str) -> str:
        if self.fabric_bin_dir:
            return os.path.join(self.fabric_bin_dir, binary)
        return binary
