from enum import Enum

class FabricCAClientCommand(str, Enum):
    AFFILIATION = "affiliation"
    CERTIFICATE = "certificate"
    COMPLETION = "completion"
    ENROLL = "enroll"
    GENCRL = "gencrl"
    GENCSR = "gencsr"
    GETCAINFO = "getcainfo"
    HELP = "help"
    IDENTITY = "identity"
    REENROLL = "reenroll"
    REGISTER = "register"
    REVOKE = "revoke"
    VERSION = "version"


class FabricCAClientAction(str, Enum):
    """Positional action for the resource subcommands (affiliation, identity, certificate)."""
    ADD = "add"
    LIST = "list"
    MODIFY = "modify"
    REMOVE = "remove"
