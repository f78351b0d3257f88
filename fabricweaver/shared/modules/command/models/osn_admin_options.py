from typing import Optional

from pydantic import Field

from fabricweaver.shared.modules.command.models.fabric_options import FabricOptions


class OSNAdminConnectionOptions(FabricOptions):
    """Admin endpoint and mutual TLS material, valid for every channel subcommand."""
    orderer_address: Optional[str] = Field(None, serialization_alias="orderer-address")
    ca_file: Optional[str] = Field(None, serialization_alias="ca-file")
    client_cert: Optional[str] = Field(None, serialization_alias="client-cert")
    client_key: Optional[str] = Field(None, serialization_alias="client-key")
    no_status: Optional[bool] = Field(None, serialization_alias="no-status")


class OSNAdminChannelOptions(FabricOptions):
    channel_id: Optional[str] = Field(None, serialization_alias="channelID")
    config_block: Optional[str] = Field(None, serialization_alias="config-block")
