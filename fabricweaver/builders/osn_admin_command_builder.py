from typing import Any, Mapping, Optional, Union

from fabricweaver.builders.base_command_builder import BaseCommandBuilder
from fabricweaver.shared.modules.command.enums.fabric_binary_enum import FabricBinary
from fabricweaver.shared.modules.command.enums.osn_admin_command_enum import (
    OSN_ADMIN_BASE_COMMAND,
    OSNAdminCommand,
)
from fabricweaver.shared.modules.command.models.osn_admin_options import (
    OSNAdminChannelOptions,
    OSNAdminConnectionOptions,
)

ALL_COMMANDS = tuple(OSNAdminCommand)


class OSNAdminCommandBuilder(BaseCommandBuilder):
    """
    Builds `osnadmin channel <join|list|remove>` invocations against an
    orderer's admin endpoint.

    Example:
        builder = (OSNAdminCommandBuilder()
            .set_sub_command(OSNAdminCommand.JOIN)
            .set_channel_id("mychannel")
            .set_config_block("/tmp/block.pb"))
        builder.get_args()
        # -> ["join", "--channelID", "mychannel", "--config-block", "/tmp/block.pb"]
        builder.build()
        # -> "osnadmin channel join --channelID mychannel --config-block /tmp/block.pb"
    """

    binary = FabricBinary.OSNADMIN
    command_enum = OSNAdminCommand
    default_command = OSNAdminCommand.JOIN
    base_command = OSN_ADMIN_BASE_COMMAND

    def set_sub_command(self, command: Optional[Union[OSNAdminCommand, str]]):
        return self.set_command(command)

    def set_connection_options(self, options: Optional[Union[OSNAdminConnectionOptions, Mapping[str, Any]]] = None):
        return self._apply_options(options, OSNAdminConnectionOptions, *ALL_COMMANDS)

    def set_channel_options(self, options: Optional[Union[OSNAdminChannelOptions, Mapping[str, Any]]] = None):
        if options is not None and not isinstance(options, OSNAdminChannelOptions):
            options = OSNAdminChannelOptions.model_validate(options)
        allowed = (OSNAdminCommand.JOIN,) if options is not None and options.config_block is not None else ALL_COMMANDS
        return self._apply_options(options, OSNAdminChannelOptions, *allowed)

    def set_orderer_address(self, address: Optional[str] = None):
        return self._set_option("orderer-address", address, *ALL_COMMANDS)

    def set_ca_file(self, ca_file: Optional[str] = None):
        return self._set_option("ca-file", ca_file, *ALL_COMMANDS)

    def set_client_cert(self, client_cert: Optional[str] = None):
        return self._set_option("client-cert", client_cert, *ALL_COMMANDS)

    def set_client_key(self, client_key: Optional[str] = None):
        return self._set_option("client-key", client_key, *ALL_COMMANDS)

    def set_no_status(self, no_status: Optional[bool] = None):
        return self._set_option("no-status", no_status, *ALL_COMMANDS)

    def set_channel_id(self, channel_id: Optional[str] = None):
        return self._set_option("channelID", channel_id, *ALL_COMMANDS)

    def set_config_block(self, config_block: Optional[str] = None):
        return self._set_option("config-block", config_block, OSNAdminCommand.JOIN)

    def set_help(self, show: Optional[bool] = None):
        return self._set_option("help", show, *ALL_COMMANDS)
