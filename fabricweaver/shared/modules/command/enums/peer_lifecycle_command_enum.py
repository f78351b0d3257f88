from enum import Enum

# two tokens on the command line: `peer lifecycle chaincode <sub>`
PEER_LIFECYCLE_BASE_COMMAND = "lifecycle chaincode"


class PeerLifecycleChaincodeCommand(str, Enum):
    PACKAGE = "package"
    INSTALL = "install"
    QUERYINSTALLED = "queryinstalled"
    GETINSTALLEDPACKAGE = "getinstalledpackage"
    CALCULATEPACKAGEID = "calculatepackageid"
    APPROVEFORMYORG = "approveformyorg"
    QUERYAPPROVED = "queryapproved"
    CHECKCOMMITREADINESS = "checkcommitreadiness"
    COMMIT = "commit"
    QUERYCOMMITTED = "querycommitted"


class ChaincodeLanguage(str, Enum):
    GOLANG = "golang"
    JAVA = "java"
    NODE = "node"
