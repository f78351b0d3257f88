from typing import Optional

from fabricweaver.builders.base_command_builder import BaseCommandBuilder
from fabricweaver.shared.modules.command.enums.fabric_binary_enum import FabricBinary
from fabricweaver.shared.modules.command.enums.peer_node_command_enum import (
    PEER_NODE_BASE_COMMAND,
    PeerNodeCommand,
)

CHANNEL_COMMANDS = (
    PeerNodeCommand.PAUSE,
    PeerNodeCommand.RESUME,
    PeerNodeCommand.ROLLBACK,
    PeerNodeCommand.UNJOIN,
)


class PeerNodeCommandBuilder(BaseCommandBuilder):
    """Builds `peer node <subcommand>` invocations."""

    binary = FabricBinary.PEER
    command_enum = PeerNodeCommand
    default_command = PeerNodeCommand.START
    base_command = PEER_NODE_BASE_COMMAND
    readiness_patterns = {
        PeerNodeCommand.START: r"Started peer with ID",
    }

    def set_development_mode(self, enable: Optional[bool] = None):
        return self._set_option("peer-chaincodedev", enable, PeerNodeCommand.START)

    def set_channel_id(self, channel_id: Optional[str] = None):
        return self._set_option("channelID", channel_id, *CHANNEL_COMMANDS)

    def set_block_number(self, block_number: Optional[int] = None):
        return self._set_option("blockNumber", block_number, PeerNodeCommand.ROLLBACK)

    def set_help(self, show: Optional[bool] = None):
        return self._set_option("help", show, *PeerNodeCommand)
