from typing import Optional, Union

from pydantic import Field

from fabricweaver.shared.modules.command.enums.peer_lifecycle_command_enum import ChaincodeLanguage
from fabricweaver.shared.modules.command.models.fabric_options import FabricOptions


class PeerChaincodeSpecOptions(FabricOptions):
    name: Optional[str] = None
    version: Optional[str] = None
    path: Optional[str] = None
    lang: Optional[Union[ChaincodeLanguage, str]] = None
    ctor: Optional[str] = Field(None, description='Constructor message as JSON, e.g. {"Args":["init"]}')
    channel_id: Optional[str] = Field(None, serialization_alias="channelID")
    policy: Optional[str] = None
    collections_config: Optional[str] = Field(None, serialization_alias="collections-config")


class PeerChaincodeInvokeOptions(FabricOptions):
    is_init: Optional[bool] = Field(None, serialization_alias="isInit")
    wait_for_event: Optional[bool] = Field(None, serialization_alias="waitForEvent")
    wait_for_event_timeout: Optional[str] = Field(None, serialization_alias="waitForEventTimeout")


class PeerChaincodeListOptions(FabricOptions):
    installed: Optional[bool] = None
    instantiated: Optional[bool] = None
    channel_id: Optional[str] = Field(None, serialization_alias="channelID")
