from typing import Any, Dict, List, Mapping, Optional, Union

from fabricweaver.builders.peer_target_command_builder import PeerTargetCommandBuilder
from fabricweaver.shared.modules.command.enums.fabric_binary_enum import FabricBinary
from fabricweaver.shared.modules.command.enums.peer_chaincode_command_enum import (
    PEER_CHAINCODE_BASE_COMMAND,
    PeerChaincodeCommand,
)
from fabricweaver.shared.modules.command.models.peer_chaincode_options import (
    PeerChaincodeInvokeOptions,
    PeerChaincodeListOptions,
    PeerChaincodeSpecOptions,
)
from fabricweaver.shared.modules.command.models.peer_options import PeerOrdererConnectionOptions

Cmd = PeerChaincodeCommand

LOCATION_COMMANDS = (Cmd.PACKAGE, Cmd.INSTALL, Cmd.SIGNPACKAGE)
SPEC_COMMANDS = (Cmd.INSTALL, Cmd.INSTANTIATE, Cmd.INVOKE, Cmd.PACKAGE, Cmd.QUERY, Cmd.UPGRADE)
ORDERER_COMMANDS = (Cmd.INSTANTIATE, Cmd.INVOKE, Cmd.UPGRADE)


class PeerChaincodeCommandBuilder(PeerTargetCommandBuilder):
    """Builds legacy `peer chaincode <subcommand>` invocations (pre-lifecycle chaincode)."""

    binary = FabricBinary.PEER
    command_enum = PeerChaincodeCommand
    default_command = PeerChaincodeCommand.PACKAGE
    base_command = PEER_CHAINCODE_BASE_COMMAND
    peer_target_commands = (Cmd.INSTALL, Cmd.INVOKE, Cmd.QUERY, Cmd.LIST)

    def __init__(self, logger=None, runner=None, settings=None):
        super().__init__(logger=logger, runner=runner, settings=settings)
        self.locations: Dict[PeerChaincodeCommand, List[str]] = {}

    def set_location(self, location: Optional[str] = None, signed_output: Optional[str] = None):
        """
        Package file positional. `signpackage` takes the input package and the
        signed output file.
        """
        if location is None:
            return self
        self._assert_command(*LOCATION_COMMANDS)
        if signed_output is not None:
            self._assert_command(Cmd.SIGNPACKAGE)
        positionals = [location] if signed_output is None else [location, signed_output]
        self.logger.debug(f"Setting {self.command.value} location: {' '.join(positionals)}")
        self.locations[self.command] = positionals
        return self

    def set_spec_options(self, options: Optional[Union[PeerChaincodeSpecOptions, Mapping[str, Any]]] = None):
        return self._apply_options(options, PeerChaincodeSpecOptions, *SPEC_COMMANDS)

    def set_invoke_options(self, options: Optional[Union[PeerChaincodeInvokeOptions, Mapping[str, Any]]] = None):
        return self._apply_options(options, PeerChaincodeInvokeOptions, Cmd.INVOKE)

    def set_list_options(self, options: Optional[Union[PeerChaincodeListOptions, Mapping[str, Any]]] = None):
        return self._apply_options(options, PeerChaincodeListOptions, Cmd.LIST)

    def set_orderer_connection_options(
        self, options: Optional[Union[PeerOrdererConnectionOptions, Mapping[str, Any]]] = None
    ):
        return self._apply_options(options, PeerOrdererConnectionOptions, *ORDERER_COMMANDS)

    def _get_positionals(self) -> List[str]:
        return list(self.locations.get(self.command, []))
