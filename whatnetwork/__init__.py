"""
whatnetwork: tell what kind of network failure an HTTP error was, and
whether basic internet connectivity is present.
"""

from .error_kinds import BasicErrorType, ConnectionStatus, CONNECTIVITY_CATEGORIES
from .errors import BasicError, NetOpError, SyscallError, TransportError
from .classifier import classify, is_connection_error
from .connection_check import check_connection, check_connection_and_host

__all__ = [
    "BasicErrorType",
    "ConnectionStatus",
    "CONNECTIVITY_CATEGORIES",
    "BasicError",
    "NetOpError",
    "SyscallError",
    "TransportError",
    "classify",
    "is_connection_error",
    "check_connection",
    "check_connection_and_host",
]
