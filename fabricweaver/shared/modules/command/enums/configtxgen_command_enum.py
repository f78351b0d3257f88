from enum import Enum

class ConfigtxgenCommand(str, Enum):
    """
    configtxgen has no subcommands; the operation is picked by a flag. Each
    value is that flag's name.
    """
    OUTPUT_BLOCK = "outputBlock"
    OUTPUT_CREATE_CHANNEL_TX = "outputCreateChannelTx"
    OUTPUT_ANCHOR_PEERS_UPDATE = "outputAnchorPeersUpdate"
    INSPECT_BLOCK = "inspectBlock"
    INSPECT_CHANNEL_CREATE_TX = "inspectChannelCreateTx"
    PRINT_ORG = "printOrg"
    VERSION = "version"
