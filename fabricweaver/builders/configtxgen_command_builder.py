from typing import Any, List, Mapping, Optional, Union

from fabricweaver.builders.base_command_builder import BaseCommandBuilder
from fabricweaver.shared.modules.command.enums.configtxgen_command_enum import ConfigtxgenCommand
from fabricweaver.shared.modules.command.enums.fabric_binary_enum import FabricBinary
from fabricweaver.shared.modules.command.models.configtxgen_options import ConfigtxgenProfileOptions

OUTPUT_COMMANDS = (
    ConfigtxgenCommand.OUTPUT_BLOCK,
    ConfigtxgenCommand.OUTPUT_CREATE_CHANNEL_TX,
    ConfigtxgenCommand.OUTPUT_ANCHOR_PEERS_UPDATE,
)
INSPECT_COMMANDS = (ConfigtxgenCommand.INSPECT_BLOCK, ConfigtxgenCommand.INSPECT_CHANNEL_CREATE_TX)
CONFIG_COMMANDS = (*OUTPUT_COMMANDS, ConfigtxgenCommand.PRINT_ORG)


class ConfigtxgenCommandBuilder(BaseCommandBuilder):
    """
    Builds `configtxgen` invocations. configtxgen has no subcommands: the
    active command selects which path flag is written (`--outputBlock`,
    `--inspectBlock`, ...) and which other options are accepted.

    Example (channel genesis block, the input of `osnadmin channel join`):
        builder = (ConfigtxgenCommandBuilder()
            .set_command(ConfigtxgenCommand.OUTPUT_BLOCK)
            .set_config_path("./config")
            .set_profile_options({"profile": "ChannelUsingRaft", "channel_id": "mychannel"})
            .set_path("./channel-artifacts/mychannel.block"))
        builder.build()
        # -> "configtxgen --configPath ./config --profile ChannelUsingRaft --channelID mychannel
        #     --outputBlock ./channel-artifacts/mychannel.block"
    """

    binary = FabricBinary.CONFIGTXGEN
    command_enum = ConfigtxgenCommand
    default_command = ConfigtxgenCommand.OUTPUT_BLOCK

    def set_config_path(self, path: Optional[str] = None):
        """Directory holding configtx.yaml."""
        return self._set_option("configPath", path, *CONFIG_COMMANDS)

    def set_profile_options(self, options: Optional[Union[ConfigtxgenProfileOptions, Mapping[str, Any]]] = None):
        return self._apply_options(options, ConfigtxgenProfileOptions, *OUTPUT_COMMANDS)

    def set_path(self, path: Optional[str] = None):
        """Output or inspected file, written under the active command's flag."""
        return self._set_option(self.command.value, path, *OUTPUT_COMMANDS, *INSPECT_COMMANDS)

    def set_print_org(self, org: Optional[str] = None):
        return self._set_option("printOrg", org, ConfigtxgenCommand.PRINT_ORG)

    def _get_command_tokens(self) -> List[str]:
        if self.command is ConfigtxgenCommand.VERSION:
            return ["--version"]
        return []
