from typing import Optional

from pydantic import Field

from fabricweaver.shared.modules.command.models.fabric_options import FabricOptions


class PeerChannelCreateOptions(FabricOptions):
    channel_id: Optional[str] = Field(None, serialization_alias="channelID")
    file: Optional[str] = Field(None, description="Channel creation tx from configtxgen")
    output_block: Optional[str] = Field(None, serialization_alias="outputBlock")
    timeout: Optional[str] = Field(None, description="Go duration, e.g. 10s")
