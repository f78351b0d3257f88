from enum import Enum

# `peer` subcommands are grouped; only the `node` group is built here
PEER_NODE_BASE_COMMAND = "node"


class PeerNodeCommand(str, Enum):
    PAUSE = "pause"
    REBUILD_DBS = "rebuild-dbs"
    RESET = "reset"
    RESUME = "resume"
    ROLLBACK = "rollback"
    START = "start"
    UNJOIN = "unjoin"
    UPGRADE_DBS = "upgrade-dbs"
