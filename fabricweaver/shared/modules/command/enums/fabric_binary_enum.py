from enum import Enum

class FabricBinary(str, Enum):
    CONFIGTXGEN = "configtxgen"
    CONFIGTXLATOR = "configtxlator"
    OSNADMIN = "osnadmin"
    CA_SERVER = "fabric-ca-server"
    CA_CLIENT = "fabric-ca-client"
    ORDERER = "orderer"
    PEER = "peer"
