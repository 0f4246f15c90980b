# whatnetwork/error_kinds.py
"""
Canonical error categories and connection statuses.

Purpose: give callers one closed vocabulary for "what kind of failure was
this" instead of brittle string literals or nested library exceptions.
"""

from enum import Enum


class BasicErrorType(str, Enum):
    """
    Classification taxonomy for failed network operations.

    Inherits from str so values compare equal to their identifiers.
    """
    CANT_RESOLVE_HOST = "CantResolveHost"
    CANT_FIND_HOST = "CantFindHost"
    CANT_CONNECT_TO_HOST = "CantConnectToHost"
    UNEXPECTED_EOF = "UnexpectedEof"
    BAD_DATA_RECEIVED = "BadDataReceived"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


class ConnectionStatus(str, Enum):
    """Outcome of a connectivity check."""
    NO_INTERFACES = "NoInterfaces"
    NO_INTERFACES_UP = "NoInterfacesUp"
    NO_NON_LOOPBACKS_FOUND = "NoNonLoopbacksFound"
    NO_INTERNET = "NoInternet"
    CONNECTED = "Connected"

    def __str__(self) -> str:
        return self.value


# Categories that mean "the network path itself is broken"
CONNECTIVITY_CATEGORIES = frozenset({
    BasicErrorType.CANT_RESOLVE_HOST,
    BasicErrorType.CANT_FIND_HOST,
    BasicErrorType.CANT_CONNECT_TO_HOST,
})
