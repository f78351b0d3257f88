from typing import Optional

from pydantic import Field

from fabricweaver.shared.modules.command.models.fabric_options import FabricOptions


class ConfigtxgenProfileOptions(FabricOptions):
    profile: Optional[str] = Field(None, description="Profile from configtx.yaml, e.g. ChannelUsingRaft")
    channel_id: Optional[str] = Field(None, serialization_alias="channelID")
    as_org: Optional[str] = Field(None, serialization_alias="asOrg")
    channel_create_tx_base_profile: Optional[str] = Field(None, serialization_alias="channelCreateTxBaseProfile")
