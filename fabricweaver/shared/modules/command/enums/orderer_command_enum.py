from enum import Enum

class OrdererCommand(str, Enum):
    START = "start"
    VERSION = "version"
    HELP = "help"
