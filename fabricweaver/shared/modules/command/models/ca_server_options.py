from typing import List, Optional

from pydantic import Field, field_validator

from fabricweaver.shared.modules.command.enums.ca_server_enums import (
    ClientAuthType,
    FabricCAServerCurveName,
    FabricCAServerDBType,
    FabricCAServerEnrollmentType,
)
from fabricweaver.shared.modules.command.enums.fabric_log_level_enum import FabricLogLevel
from fabricweaver.shared.modules.command.models.fabric_options import FabricOptions


class CAServerGeneralOptions(FabricOptions):
    address: Optional[str] = None
    port: Optional[int] = None
    home: Optional[str] = None
    boot: Optional[str] = Field(None, description="Bootstrap admin as user:password")
    debug: Optional[bool] = None
    loglevel: Optional[FabricLogLevel] = None
    cacount: Optional[int] = None
    cafiles: Optional[List[str]] = None
    crlsizelimit: Optional[int] = None

    @field_validator("boot")
    @classmethod
    def _check_boot(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        user, sep, password = value.partition(":")
        if not sep or not user or not password:
            raise ValueError("boot must be formatted as user:password")
        return value


class CAServerTLSOptions(FabricOptions):
    enabled: Optional[bool] = Field(None, serialization_alias="tls.enabled")
    certfile: Optional[str] = Field(None, serialization_alias="tls.certfile")
    keyfile: Optional[str] = Field(None, serialization_alias="tls.keyfile")
    clientauth_certfiles: Optional[List[str]] = Field(None, serialization_alias="tls.clientauth.certfiles")
    clientauth_type: Optional[ClientAuthType] = Field(None, serialization_alias="tls.clientauth.type")


class CAServerCAOptions(FabricOptions):
    name: Optional[str] = Field(None, serialization_alias="ca.name")
    keyfile: Optional[str] = Field(None, serialization_alias="ca.keyfile")
    certfile: Optional[str] = Field(None, serialization_alias="ca.certfile")
    chainfile: Optional[str] = Field(None, serialization_alias="ca.chainfile")
    reenroll_ignore_cert_expiry: Optional[bool] = Field(None, serialization_alias="ca.reenrollignorecertexpiry")


class CAServerCorsOptions(FabricOptions):
    enabled: Optional[bool] = Field(None, serialization_alias="cors.enabled")
    origins: Optional[List[str]] = Field(None, serialization_alias="cors.origins")


class CAServerCSROptions(FabricOptions):
    """CSR sent to a parent server when this server runs as an intermediate CA."""
    cn: Optional[str] = Field(None, serialization_alias="csr.cn")
    hosts: Optional[List[str]] = Field(None, serialization_alias="csr.hosts")
    keyrequest_algo: Optional[str] = Field(None, serialization_alias="csr.keyrequest.algo")
    keyrequest_size: Optional[int] = Field(None, serialization_alias="csr.keyrequest.size")
    keyrequest_reusekey: Optional[bool] = Field(None, serialization_alias="csr.keyrequest.reusekey")
    serialnumber: Optional[str] = Field(None, serialization_alias="csr.serialnumber")

    @field_validator("hosts")
    @classmethod
    def _dedupe_hosts(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is None:
            return value
        return list(dict.fromkeys(value))


class CAServerDBOptions(FabricOptions):
    type: Optional[FabricCAServerDBType] = Field(None, serialization_alias="db.type")
    datasource: Optional[str] = Field(None, serialization_alias="db.datasource")
    tls_certfiles: Optional[List[str]] = Field(None, serialization_alias="db.tls.certfiles")
    tls_client_certfile: Optional[str] = Field(None, serialization_alias="db.tls.client.certfile")
    tls_client_keyfile: Optional[str] = Field(None, serialization_alias="db.tls.client.keyfile")


class CAServerIdemixOptions(FabricOptions):
    curve: Optional[FabricCAServerCurveName] = Field(None, serialization_alias="idemix.curve")
    nonceexpiration: Optional[str] = Field(None, serialization_alias="idemix.nonceexpiration")
    noncesweepinterval: Optional[str] = Field(None, serialization_alias="idemix.noncesweepinterval")
    rhpoolsize: Optional[int] = Field(None, serialization_alias="idemix.rhpoolsize")


class CAServerIntermediateOptions(FabricOptions):
    parentserver_url: Optional[str] = Field(None, serialization_alias="intermediate.parentserver.url")
    parentserver_caname: Optional[str] = Field(None, serialization_alias="intermediate.parentserver.caname")
    enrollment_type: Optional[FabricCAServerEnrollmentType] = Field(
        None, serialization_alias="intermediate.enrollment.type"
    )
    enrollment_profile: Optional[str] = Field(None, serialization_alias="intermediate.enrollment.profile")
    enrollment_label: Optional[str] = Field(None, serialization_alias="intermediate.enrollment.label")
    tls_certfiles: Optional[List[str]] = Field(None, serialization_alias="intermediate.tls.certfiles")
    tls_client_certfile: Optional[str] = Field(None, serialization_alias="intermediate.tls.client.certfile")
    tls_client_keyfile: Optional[str] = Field(None, serialization_alias="intermediate.tls.client.keyfile")


class CAServerLDAPOptions(FabricOptions):
    enabled: Optional[bool] = Field(None, serialization_alias="ldap.enabled")
    url: Optional[str] = Field(None, serialization_alias="ldap.url")
    tls_certfiles: Optional[List[str]] = Field(None, serialization_alias="ldap.tls.certfiles")
    tls_client_certfile: Optional[str] = Field(None, serialization_alias="ldap.tls.client.certfile")
    tls_client_keyfile: Optional[str] = Field(None, serialization_alias="ldap.tls.client.keyfile")
    attribute_names: Optional[List[str]] = Field(None, serialization_alias="ldap.attribute.names")
    groupfilter: Optional[str] = Field(None, serialization_alias="ldap.groupfilter")
    userfilter: Optional[str] = Field(None, serialization_alias="ldap.userfilter")


class CAServerRegistryOptions(FabricOptions):
    max_enrollments: Optional[int] = Field(None, serialization_alias="registry.maxenrollments")
    allow_affiliations_remove: Optional[bool] = Field(None, serialization_alias="cfg.affiliations.allowremove")
    allow_identities_remove: Optional[bool] = Field(None, serialization_alias="cfg.identities.allowremove")
    password_attempts: Optional[int] = Field(None, serialization_alias="cfg.identities.passwordattempts")
    crl_expiry: Optional[str] = Field(None, serialization_alias="crl.expiry")
