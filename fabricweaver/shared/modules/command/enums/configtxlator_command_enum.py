from enum import Enum

class ConfigtxlatorCommand(str, Enum):
    START = "start"
    PROTO_ENCODE = "proto_encode"
    PROTO_DECODE = "proto_decode"
    PROTO_COMPARE = "proto_compare"
    COMPUTE_UPDATE = "compute_update"
    VERSION = "version"
    HELP = "help"


class ConfigtxlatorProtoMessage(str, Enum):
    """Message types understood by `proto_encode` / `proto_decode --type`."""
    BLOCK = "common.Block"
    BLOCK_DATA = "common.BlockData"
    BLOCK_METADATA = "common.BlockMetadata"
    CONFIG = "common.Config"
    CONFIG_ENVELOPE = "common.ConfigEnvelope"
    CONFIG_UPDATE = "common.ConfigUpdate"
    CONFIG_UPDATE_ENVELOPE = "common.ConfigUpdateEnvelope"
    ENVELOPE = "common.Envelope"
    SIGNED_ENVELOPE = "common.SignedEnvelope"
    CHAINCODE_DEFINITION = "peer.ChaincodeDefinition"
