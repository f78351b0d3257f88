from enum import Enum
from typing import Dict, List, Type, Union

from fabricweaver.builders.base_command_builder import BaseCommandBuilder
from fabricweaver.builders.ca_client_command_builder import FabricCAClientCommandBuilder
from fabricweaver.builders.ca_server_command_builder import FabricCAServerCommandBuilder
from fabricweaver.builders.configtxgen_command_builder import ConfigtxgenCommandBuilder
from fabricweaver.builders.configtxlator_command_builder import ConfigtxlatorCommandBuilder
from fabricweaver.builders.orderer_command_builder import OrdererCommandBuilder
from fabricweaver.builders.osn_admin_command_builder import OSNAdminCommandBuilder
from fabricweaver.builders.peer_chaincode_command_builder import PeerChaincodeCommandBuilder
from fabricweaver.builders.peer_channel_command_builder import PeerChannelCommandBuilder
from fabricweaver.builders.peer_lifecycle_chaincode_command_builder import PeerLifecycleChaincodeCommandBuilder
from fabricweaver.builders.peer_node_command_builder import PeerNodeCommandBuilder
from fabricweaver.shared.modules.command.enums.fabric_binary_enum import FabricBinary


class CommandBuilderFactory:
    """
    Factory class for creating the command builder for a binary, or for a
    binary plus base command where one binary has several builders
    ("peer channel", "peer lifecycle chaincode", ...). A bare "peer" gives
    the `peer node` builder.
    """

    _builders: Dict[str, Type[BaseCommandBuilder]] = {
        FabricBinary.CONFIGTXGEN.value: ConfigtxgenCommandBuilder,
        FabricBinary.CONFIGTXLATOR.value: ConfigtxlatorCommandBuilder,
        FabricBinary.OSNADMIN.value: OSNAdminCommandBuilder,
        FabricBinary.CA_SERVER.value: FabricCAServerCommandBuilder,
        FabricBinary.CA_CLIENT.value: FabricCAClientCommandBuilder,
        FabricBinary.ORDERER.value: OrdererCommandBuilder,
        FabricBinary.PEER.value: PeerNodeCommandBuilder,
        "peer node": PeerNodeCommandBuilder,
        "peer channel": PeerChannelCommandBuilder,
        "peer chaincode": PeerChaincodeCommandBuilder,
        "peer lifecycle chaincode": PeerLifecycleChaincodeCommandBuilder,
    }

    @classmethod
    def create_builder(cls, command: Union[FabricBinary, str], **kwargs) -> BaseCommandBuilder:
        """
        Create a fresh builder.

        Args:
            command: FabricBinary member, binary name ("osnadmin") or binary
                plus base command ("peer channel")
            **kwargs: Forwarded to the builder (logger, runner, settings)

        Returns:
            BaseCommandBuilder: New builder instance

        Raises:
            ValueError: If no builder is registered for the command
        """
        key = _key(command)
        if key not in cls._builders:
            raise ValueError(f"No command builder available for: {key}")
        return cls._builders[key](**kwargs)

    @classmethod
    def get_supported_binaries(cls) -> List[str]:
        return sorted({builder.binary.value for builder in cls._builders.values()})

    @classmethod
    def get_supported_commands(cls) -> List[str]:
        return list(cls._builders)

    @classmethod
    def register_builder(cls, command: Union[FabricBinary, str], builder_class: Type[BaseCommandBuilder]):
        """
        Register (or replace) the builder class for a binary or binary plus base command.
        """
        cls._builders[_key(command)] = builder_class


def _key(command: Union[FabricBinary, str]) -> str:
    if isinstance(command, Enum):
        return command.value
    return " ".join(str(command).split())
