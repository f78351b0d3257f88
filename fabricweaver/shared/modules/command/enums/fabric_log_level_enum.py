from enum import Enum

class FabricLogLevel(str, Enum):
    """Log levels accepted by the `--loglevel` flag of the Fabric binaries."""
    INFO = "info"
    WARNING = "warning"
    DEBUG = "debug"
    ERROR = "error"
    FATAL = "fatal"
    CRITICAL = "critical"
