from typing import Any, Dict, List, Mapping, Optional, Union

from fabricweaver.builders.peer_target_command_builder import PeerTargetCommandBuilder
from fabricweaver.shared.modules.command.enums.fabric_binary_enum import FabricBinary
from fabricweaver.shared.modules.command.enums.peer_lifecycle_command_enum import (
    PEER_LIFECYCLE_BASE_COMMAND,
    PeerLifecycleChaincodeCommand,
)
from fabricweaver.shared.modules.command.models.peer_lifecycle_options import (
    LifecycleDefinitionOptions,
    LifecyclePackageOptions,
)
from fabricweaver.shared.modules.command.models.peer_options import PeerOrdererConnectionOptions

Cmd = PeerLifecycleChaincodeCommand

# package path positional: `package <out.tar.gz>`, `install <pkg>`, `calculatepackageid <pkg>`
PACKAGE_FILE_COMMANDS = (Cmd.PACKAGE, Cmd.INSTALL, Cmd.CALCULATEPACKAGEID)
LOCAL_COMMANDS = (Cmd.PACKAGE, Cmd.CALCULATEPACKAGEID)
REMOTE_COMMANDS = tuple(c for c in Cmd if c not in LOCAL_COMMANDS)
DEFINITION_COMMANDS = (
    Cmd.APPROVEFORMYORG,
    Cmd.QUERYAPPROVED,
    Cmd.CHECKCOMMITREADINESS,
    Cmd.COMMIT,
    Cmd.QUERYCOMMITTED,
)
OUTPUT_COMMANDS = (
    Cmd.QUERYINSTALLED,
    Cmd.CALCULATEPACKAGEID,
    Cmd.QUERYAPPROVED,
    Cmd.CHECKCOMMITREADINESS,
    Cmd.QUERYCOMMITTED,
)


class PeerLifecycleChaincodeCommandBuilder(PeerTargetCommandBuilder):
    """
    Builds `peer lifecycle chaincode <subcommand>` invocations, from packaging
    through approval and commit.

    Example:
        builder = (PeerLifecycleChaincodeCommandBuilder()
            .set_command(PeerLifecycleChaincodeCommand.COMMIT)
            .set_orderer_connection_options({"orderer": "orderer:7050", "tls": True, "cafile": "ca.pem"})
            .set_definition_options({"channel_id": "mychannel", "name": "basic", "version": "1.0", "sequence": 1})
            .set_peer_addresses(["peer0.org1:7051"], ["org1-tls.pem"]))
        builder.get_args()
        # -> ["commit", "--orderer", "orderer:7050", "--tls", "--cafile", "ca.pem",
        #     "--channelID", "mychannel", "--name", "basic", "--version", "1.0", "--sequence", "1",
        #     "--peerAddresses", "peer0.org1:7051", "--tlsRootCertFiles", "org1-tls.pem"]
    """

    binary = FabricBinary.PEER
    command_enum = PeerLifecycleChaincodeCommand
    default_command = PeerLifecycleChaincodeCommand.PACKAGE
    base_command = PEER_LIFECYCLE_BASE_COMMAND
    peer_target_commands = REMOTE_COMMANDS

    def __init__(self, logger=None, runner=None, settings=None):
        super().__init__(logger=logger, runner=runner, settings=settings)
        self.package_files: Dict[PeerLifecycleChaincodeCommand, str] = {}

    def set_destination(self, package_file: Optional[str] = None):
        """Package archive: written by `package`, read by `install` and `calculatepackageid`."""
        if package_file is None:
            return self
        self._assert_command(*PACKAGE_FILE_COMMANDS)
        self.logger.debug(f"Setting {self.command.value} package file: {package_file}")
        self.package_files[self.command] = package_file
        return self

    def set_package_options(self, options: Optional[Union[LifecyclePackageOptions, Mapping[str, Any]]] = None):
        return self._apply_options(options, LifecyclePackageOptions, Cmd.PACKAGE)

    def set_definition_options(
        self, options: Optional[Union[LifecycleDefinitionOptions, Mapping[str, Any]]] = None
    ):
        return self._apply_options(options, LifecycleDefinitionOptions, *DEFINITION_COMMANDS)

    def set_orderer_connection_options(
        self, options: Optional[Union[PeerOrdererConnectionOptions, Mapping[str, Any]]] = None
    ):
        return self._apply_options(options, PeerOrdererConnectionOptions, *REMOTE_COMMANDS)

    def set_package_id(self, package_id: Optional[str] = None):
        return self._set_option("package-id", package_id, Cmd.GETINSTALLEDPACKAGE, Cmd.APPROVEFORMYORG)

    def set_output(self, output: Optional[str] = None):
        """Output format, e.g. `json`."""
        return self._set_option("output", output, *OUTPUT_COMMANDS)

    def set_output_directory(self, directory: Optional[str] = None):
        return self._set_option("output-directory", directory, Cmd.GETINSTALLEDPACKAGE)

    def _get_positionals(self) -> List[str]:
        package_file = self.package_files.get(self.command)
        return [package_file] if package_file else []
