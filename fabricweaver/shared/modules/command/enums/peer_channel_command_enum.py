from enum import Enum

PEER_CHANNEL_BASE_COMMAND = "channel"


class PeerChannelCommand(str, Enum):
    CREATE = "create"
    FETCH = "fetch"
    GETINFO = "getinfo"
    JOIN = "join"
    JOINBYSNAPSHOT = "joinbysnapshot"
    JOINBYSNAPSHOTSTATUS = "joinbysnapshotstatus"
    LIST = "list"
    SIGNCONFIGTX = "signconfigtx"
    UPDATE = "update"


class PeerChannelBlockReference(str, Enum):
    """First positional of `peer channel fetch`; a block number is also accepted."""
    NEWEST = "newest"
    OLDEST = "oldest"
    CONFIG = "config"
