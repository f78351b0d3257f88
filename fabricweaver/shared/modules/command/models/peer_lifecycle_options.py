from typing import Optional, Union

from pydantic import Field

from fabricweaver.shared.modules.command.enums.peer_lifecycle_command_enum import ChaincodeLanguage
from fabricweaver.shared.modules.command.models.fabric_options import FabricOptions


class LifecyclePackageOptions(FabricOptions):
    path: Optional[str] = Field(None, description="Chaincode source directory")
    lang: Optional[Union[ChaincodeLanguage, str]] = None
    label: Optional[str] = None


class LifecycleDefinitionOptions(FabricOptions):
    """Chaincode definition fields shared by approve, readiness check, commit and the queries."""
    channel_id: Optional[str] = Field(None, serialization_alias="channelID")
    name: Optional[str] = None
    version: Optional[str] = None
    package_id: Optional[str] = Field(None, serialization_alias="package-id")
    sequence: Optional[int] = Field(None, ge=1)
    init_required: Optional[bool] = Field(None, serialization_alias="init-required")
    signature_policy: Optional[str] = Field(None, serialization_alias="signature-policy")
    channel_config_policy: Optional[str] = Field(None, serialization_alias="channel-config-policy")
    collections_config: Optional[str] = Field(None, serialization_alias="collections-config")
    endorsement_plugin: Optional[str] = Field(None, serialization_alias="endorsement-plugin")
    validation_plugin: Optional[str] = Field(None, serialization_alias="validation-plugin")
