from enum import Enum


class ErrorKind(str, Enum):
    """Why a provider call failed."""

    AUTH = "auth"

    QUOTA = "quota"

    PROVIDER = "provider"

    NETWORK = "network"

    MALFORMED = "malformed"

    UNKNOWN = "unknown"
