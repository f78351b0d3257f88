from enum import Enum

class FabricAccountType(str, Enum):
    CLIENT = "client"
    PEER = "peer"
    ORDERER = "orderer"
    ADMIN = "admin"
    USER = "user"


def get_account_type(value: str) -> FabricAccountType:
    """
    Normalize a free-form identity type. Matching is case-insensitive and
    anything unrecognised falls back to ADMIN.
    """
    try:
        return FabricAccountType(str(value).strip().lower())
    except ValueError:
        return FabricAccountType.ADMIN
