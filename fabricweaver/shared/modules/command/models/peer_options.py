from typing import List, Optional

from pydantic import Field, model_validator

from fabricweaver.shared.modules.command.models.fabric_options import FabricOptions


class PeerOrdererConnectionOptions(FabricOptions):
    """Flags the `peer` CLI uses to reach an ordering service endpoint."""
    orderer: Optional[str] = Field(None, description="host:port of the orderer")
    orderer_tls_hostname_override: Optional[str] = Field(None, serialization_alias="ordererTLSHostnameOverride")
    tls: Optional[bool] = None
    cafile: Optional[str] = None
    clientauth: Optional[bool] = None
    certfile: Optional[str] = None
    keyfile: Optional[str] = None
    conn_timeout: Optional[str] = Field(None, serialization_alias="connTimeout", description="Go duration, e.g. 3s")


class PeerTargetOptions(FabricOptions):
    """
    Endorsing peers to contact. The `peer` CLI takes these as repeated
    `--peerAddresses` / `--tlsRootCertFiles` pairs, so they are not part of
    the comma-joined option map.
    """
    peer_addresses: List[str] = Field(..., min_length=1)
    tls_root_cert_files: Optional[List[str]] = None

    @model_validator(mode="after")
    def _check_pairs(self):
        if self.tls_root_cert_files is not None and len(self.tls_root_cert_files) != len(self.peer_addresses):
            raise ValueError("tls_root_cert_files must have one entry per peer address")
        return self

    def to_tokens(self) -> List[str]:
        tokens: List[str] = []
        for i, address in enumerate(self.peer_addresses):
            tokens.extend(["--peerAddresses", address])
            if self.tls_root_cert_files is not None:
                tokens.extend(["--tlsRootCertFiles", self.tls_root_cert_files[i]])
        return tokens
