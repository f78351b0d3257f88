from enum import Enum

PEER_CHAINCODE_BASE_COMMAND = "chaincode"


class PeerChaincodeCommand(str, Enum):
    INSTALL = "install"
    INSTANTIATE = "instantiate"
    INVOKE = "invoke"
    LIST = "list"
    PACKAGE = "package"
    QUERY = "query"
    SIGNPACKAGE = "signpackage"
    UPGRADE = "upgrade"
