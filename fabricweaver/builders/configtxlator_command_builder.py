from typing import Any, Mapping, Optional, Union

from fabricweaver.builders.base_command_builder import BaseCommandBuilder
from fabricweaver.shared.modules.command.enums.configtxlator_command_enum import ConfigtxlatorCommand
from fabricweaver.shared.modules.command.enums.fabric_binary_enum import FabricBinary
from fabricweaver.shared.modules.command.models.configtxlator_options import (
    ConfigtxlatorComputeUpdateOptions,
    ConfigtxlatorProtoCompareOptions,
    ConfigtxlatorProtoOptions,
    ConfigtxlatorStartOptions,
)


class ConfigtxlatorCommandBuilder(BaseCommandBuilder):
    """
    Builds `configtxlator` invocations.

    Example:
        builder = (ConfigtxlatorCommandBuilder()
            .set_command(ConfigtxlatorCommand.PROTO_ENCODE)
            .set_proto_options({"input": "a.json", "type": "common.Block"}))
        builder.build()
        # -> "configtxlator proto_encode --input a.json --type common.Block"
    """

    binary = FabricBinary.CONFIGTXLATOR
    command_enum = ConfigtxlatorCommand
    default_command = ConfigtxlatorCommand.HELP
    readiness_patterns = {
        ConfigtxlatorCommand.START: r"Serving HTTP requests on",
    }

    def set_start_options(self, options: Optional[Union[ConfigtxlatorStartOptions, Mapping[str, Any]]] = None):
        return self._apply_options(options, ConfigtxlatorStartOptions, ConfigtxlatorCommand.START)

    def set_proto_options(self, options: Optional[Union[ConfigtxlatorProtoOptions, Mapping[str, Any]]] = None):
        """Stored under whichever of proto_encode / proto_decode is active."""
        return self._apply_options(
            options,
            ConfigtxlatorProtoOptions,
            ConfigtxlatorCommand.PROTO_ENCODE,
            ConfigtxlatorCommand.PROTO_DECODE,
        )

    def set_proto_compare_options(
        self, options: Optional[Union[ConfigtxlatorProtoCompareOptions, Mapping[str, Any]]] = None
    ):
        return self._apply_options(options, ConfigtxlatorProtoCompareOptions, ConfigtxlatorCommand.PROTO_COMPARE)

    def set_compute_update_options(
        self, options: Optional[Union[ConfigtxlatorComputeUpdateOptions, Mapping[str, Any]]] = None
    ):
        return self._apply_options(options, ConfigtxlatorComputeUpdateOptions, ConfigtxlatorCommand.COMPUTE_UPDATE)
