from typing import Optional, Union

from pydantic import Field

from fabricweaver.shared.modules.command.enums.configtxlator_command_enum import ConfigtxlatorProtoMessage
from fabricweaver.shared.modules.command.models.fabric_options import FabricOptions


class ConfigtxlatorStartOptions(FabricOptions):
    address: Optional[str] = Field(None, description="Address the REST server binds to")
    port: Optional[int] = None
    tls: Optional[bool] = None
    cafile: Optional[str] = None
    certfile: Optional[str] = None
    keyfile: Optional[str] = None


class ConfigtxlatorProtoOptions(FabricOptions):
    input: Optional[str] = None
    output: Optional[str] = None
    type: Optional[Union[ConfigtxlatorProtoMessage, str]] = Field(
        None, description="Protobuf message type, e.g. common.Block"
    )


class ConfigtxlatorProtoCompareOptions(FabricOptions):
    original: Optional[str] = None
    updated: Optional[str] = None
    output: Optional[str] = None


class ConfigtxlatorComputeUpdateOptions(FabricOptions):
    channel_id: Optional[str] = Field(None, serialization_alias="channel_id")
    original: Optional[str] = None
    updated: Optional[str] = None
    output: Optional[str] = None
