from typing import Any, List, Mapping, Optional, Union

from fabricweaver.builders.base_command_builder import BaseCommandBuilder
from fabricweaver.shared.modules.command.enums.fabric_binary_enum import FabricBinary
from fabricweaver.shared.modules.command.enums.peer_channel_command_enum import (
    PEER_CHANNEL_BASE_COMMAND,
    PeerChannelBlockReference,
    PeerChannelCommand,
)
from fabricweaver.shared.modules.command.models.peer_channel_options import PeerChannelCreateOptions
from fabricweaver.shared.modules.command.models.peer_options import PeerOrdererConnectionOptions

# subcommands that talk to the ordering service
ORDERER_COMMANDS = (PeerChannelCommand.CREATE, PeerChannelCommand.FETCH, PeerChannelCommand.UPDATE)
CHANNEL_ID_COMMANDS = (
    PeerChannelCommand.CREATE,
    PeerChannelCommand.FETCH,
    PeerChannelCommand.GETINFO,
    PeerChannelCommand.UPDATE,
)
FILE_COMMANDS = (PeerChannelCommand.CREATE, PeerChannelCommand.UPDATE, PeerChannelCommand.SIGNCONFIGTX)


class PeerChannelCommandBuilder(BaseCommandBuilder):
    """
    Builds `peer channel <subcommand>` invocations.

    Example:
        builder = (PeerChannelCommandBuilder()
            .set_command(PeerChannelCommand.FETCH)
            .set_block_reference(PeerChannelBlockReference.CONFIG)
            .set_destination("config_block.pb")
            .set_orderer("orderer:7050")
            .set_channel_id("mychannel"))
        builder.build()
        # -> "peer channel fetch config config_block.pb --orderer orderer:7050 --channelID mychannel"
    """

    binary = FabricBinary.PEER
    command_enum = PeerChannelCommand
    default_command = PeerChannelCommand.JOIN
    base_command = PEER_CHANNEL_BASE_COMMAND

    def __init__(self, logger=None, runner=None, settings=None):
        super().__init__(logger=logger, runner=runner, settings=settings)
        self.block_reference: Optional[str] = None
        self.destination: Optional[str] = None

    def set_block_reference(self, block_ref: Optional[Union[PeerChannelBlockReference, int, str]] = None):
        """`newest`, `oldest`, `config` or a block number."""
        if block_ref is None:
            return self
        self._assert_command(PeerChannelCommand.FETCH)
        if isinstance(block_ref, PeerChannelBlockReference):
            block_ref = block_ref.value
        block_ref = str(block_ref)
        if not block_ref.isdigit() and block_ref not in {r.value for r in PeerChannelBlockReference}:
            raise ValueError(f"Invalid block reference: {block_ref}")
        self.logger.debug(f"Setting block reference: {block_ref}")
        self.block_reference = block_ref
        return self

    def set_destination(self, destination: Optional[str] = None):
        if destination is None:
            return self
        self._assert_command(PeerChannelCommand.FETCH)
        self.logger.debug(f"Setting destination: {destination}")
        self.destination = destination
        return self

    def set_orderer_connection_options(
        self, options: Optional[Union[PeerOrdererConnectionOptions, Mapping[str, Any]]] = None
    ):
        return self._apply_options(options, PeerOrdererConnectionOptions, *ORDERER_COMMANDS)

    def set_create_options(self, options: Optional[Union[PeerChannelCreateOptions, Mapping[str, Any]]] = None):
        return self._apply_options(options, PeerChannelCreateOptions, PeerChannelCommand.CREATE)

    def set_block_path(self, block_path: Optional[str] = None):
        return self._set_option("blockpath", block_path, PeerChannelCommand.JOIN)

    def set_snapshot_path(self, snapshot_path: Optional[str] = None):
        return self._set_option("snapshotpath", snapshot_path, PeerChannelCommand.JOINBYSNAPSHOT)

    def set_channel_id(self, channel_id: Optional[str] = None):
        return self._set_option("channelID", channel_id, *CHANNEL_ID_COMMANDS)

    def set_orderer(self, orderer: Optional[str] = None):
        return self._set_option("orderer", orderer, *ORDERER_COMMANDS)

    def enable_tls(self, enable: Optional[bool] = None):
        return self._set_option("tls", enable, *ORDERER_COMMANDS)

    def set_tls_ca_file(self, ca_file: Optional[str] = None):
        return self._set_option("cafile", ca_file, *ORDERER_COMMANDS)

    def set_file(self, file: Optional[str] = None):
        return self._set_option("file", file, *FILE_COMMANDS)

    def set_best_effort(self, enable: Optional[bool] = None):
        return self._set_option("bestEffort", enable, PeerChannelCommand.FETCH)

    def _get_positionals(self) -> List[str]:
        if self.command is not PeerChannelCommand.FETCH:
            return []
        return [p for p in (self.block_reference, self.destination) if p is not None]
