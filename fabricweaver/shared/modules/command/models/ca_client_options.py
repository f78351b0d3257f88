from typing import List, Optional, Union

from pydantic import Field, field_validator

from fabricweaver.shared.modules.command.enums.account_type_enum import FabricAccountType, get_account_type
from fabricweaver.shared.modules.command.enums.ca_server_enums import FabricCAServerCurveName
from fabricweaver.shared.modules.command.enums.fabric_log_level_enum import FabricLogLevel
from fabricweaver.shared.modules.command.models.fabric_options import FabricOptions


class CAClientConnectionOptions(FabricOptions):
    url: Optional[str] = None
    caname: Optional[str] = None
    home: Optional[str] = None
    mspdir: Optional[str] = None
    loglevel: Optional[FabricLogLevel] = None
    myhost: Optional[str] = None


class CAClientTLSOptions(FabricOptions):
    certfiles: Optional[List[str]] = Field(None, serialization_alias="tls.certfiles")
    client_certfile: Optional[str] = Field(None, serialization_alias="tls.client.certfile")
    client_keyfile: Optional[str] = Field(None, serialization_alias="tls.client.keyfile")


class CAClientCSROptions(FabricOptions):
    cn: Optional[str] = Field(None, serialization_alias="csr.cn")
    hosts: Optional[List[str]] = Field(None, serialization_alias="csr.hosts")
    names: Optional[List[str]] = Field(None, serialization_alias="csr.names")
    serialnumber: Optional[str] = Field(None, serialization_alias="csr.serialnumber")
    keyrequest_algo: Optional[str] = Field(None, serialization_alias="csr.keyrequest.algo")
    keyrequest_size: Optional[int] = Field(None, serialization_alias="csr.keyrequest.size")
    keyrequest_reusekey: Optional[bool] = Field(None, serialization_alias="csr.keyrequest.reusekey")


class CAClientEnrollmentOptions(FabricOptions):
    attrs: Optional[List[str]] = Field(None, serialization_alias="enrollment.attrs")
    label: Optional[str] = Field(None, serialization_alias="enrollment.label")
    profile: Optional[str] = Field(None, serialization_alias="enrollment.profile")
    type: Optional[str] = Field(None, serialization_alias="enrollment.type")
    idemix_curve: Optional[FabricCAServerCurveName] = Field(None, serialization_alias="idemix.curve")


class CAClientIdentityOptions(FabricOptions):
    name: Optional[str] = Field(None, serialization_alias="id.name")
    secret: Optional[str] = Field(None, serialization_alias="id.secret")
    type: Optional[FabricAccountType] = Field(None, serialization_alias="id.type")
    affiliation: Optional[str] = Field(None, serialization_alias="id.affiliation")
    attrs: Optional[List[str]] = Field(None, serialization_alias="id.attrs")
    max_enrollments: Optional[int] = Field(None, serialization_alias="id.maxenrollments")

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, value: Optional[Union[str, FabricAccountType]]):
        if value is None or isinstance(value, FabricAccountType):
            return value
        return get_account_type(value)


class CAClientRevokeOptions(FabricOptions):
    name: Optional[str] = Field(None, serialization_alias="revoke.name")
    aki: Optional[str] = Field(None, serialization_alias="revoke.aki")
    serial: Optional[str] = Field(None, serialization_alias="revoke.serial")
    reason: Optional[str] = Field(None, serialization_alias="revoke.reason")
    gencrl: Optional[bool] = None
