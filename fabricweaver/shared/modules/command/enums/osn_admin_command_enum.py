from enum import Enum

# osnadmin only exposes channel management, every invocation is `osnadmin channel <sub>`
OSN_ADMIN_BASE_COMMAND = "channel"


class OSNAdminCommand(str, Enum):
    JOIN = "join"
    LIST = "list"
    REMOVE = "remove"
