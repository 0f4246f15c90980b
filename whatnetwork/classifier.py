# whatnetwork/classifier.py
"""
Error classifier for whatnetwork.

classify(err) reduces an exception chain to a small "shape" and then walks a
fixed decision tree over that shape:

  Transport(inner)        request-level wrapper (requests, MaxRetryError, ...)
  Operation(op, inner)    a labelled network operation ("dial", "recv", ...)
  Syscall(name)           a failed system call ("getaddrinfo")
  Sentinel()              end of stream
  Message(text)           anything else, kept as its message text

Structural rules are tried before the message rules. The message rules are
exact-match / prefix-match on known library strings and are only reached when
nothing structural matched.
"""

import errno
import http.client
import logging
import socket
import ssl
from dataclasses import dataclass

from requests.exceptions import RequestException
from urllib3.exceptions import (
    ConnectTimeoutError,
    HeaderParsingError,
    MaxRetryError,
    NameResolutionError,
    NewConnectionError,
    ProtocolError,
    ProxyError,
    ReadTimeoutError,
    SSLError as Urllib3SSLError,
)

from .error_kinds import BasicErrorType, CONNECTIVITY_CATEGORIES
from .errors import BasicError, NetOpError, SyscallError, TransportError

logger = logging.getLogger(__name__)

# http.client's message when the peer closes before sending a status line
TRANSPORT_CLOSED_MESSAGE = "Remote end closed connection without response"
MALFORMED_RESPONSE_PREFIX = "malformed HTTP response"

DIAL_OP = "dial"
LOCAL_ERROR_OP = "local error"
CONNECT_OPS = frozenset({"connect", "ConnectEx"})
RECEIVE_OPS = frozenset({"recv", "read", "WSARecv"})
RESOLVE_SYSCALLS = frozenset({"getaddrinfo", "GetAddrInfoW"})

MAX_CHAIN_DEPTH = 16

_CONNECT_ERRNOS = frozenset({
    errno.ECONNREFUSED,
    errno.EHOSTUNREACH,
    errno.ENETUNREACH,
    errno.ETIMEDOUT,
})

# Server sent something that is not a parseable HTTP response. Client-state
# errors (CannotSendRequest, ResponseNotReady, InvalidURL) are not in here.
_MALFORMED_RESPONSE_ERRORS = (
    http.client.BadStatusLine,
    http.client.LineTooLong,
    http.client.UnknownProtocol,
    HeaderParsingError,
)


@dataclass(frozen=True)
class Transport:
    inner: object


@dataclass(frozen=True)
class Operation:
    op: str
    inner: object = None


@dataclass(frozen=True)
class Syscall:
    name: str


@dataclass(frozen=True)
class Sentinel:
    pass


@dataclass(frozen=True)
class Message:
    text: str


def _chained(err):
    if err.__cause__ is not None:
        return err.__cause__
    if err.__context__ is not None and not err.__suppress_context__:
        return err.__context__
    return None


def _wrapped(err):
    """Return the exception directly wrapped by err, or None."""
    inner = None
    if isinstance(err, (TransportError, NetOpError, SyscallError)):
        inner = err.err
    elif isinstance(err, MaxRetryError):
        inner = err.reason
    elif isinstance(err, ProxyError):
        # ProxyError("Unable to connect to proxy", <cause>)
        inner = getattr(err, "original_error", None)
        if inner is None and len(err.args) > 1:
            inner = err.args[1]
    elif isinstance(err, ProtocolError):
        # ProtocolError("Connection aborted.", <cause>)
        inner = err.args[1] if len(err.args) > 1 else None
    elif isinstance(err, RequestException):
        inner = err.args[0] if err.args else None

    if isinstance(inner, BaseException):
        return inner
    return _chained(err)


def _is_transport(err):
    return isinstance(err, (TransportError, RequestException, MaxRetryError, ProxyError, ProtocolError))


def _dial_cause(cause, depth, seen):
    """Shape of whatever made a connection attempt fail."""
    if cause is None:
        return None
    if isinstance(cause, (NetOpError, SyscallError)):
        return inspect_error(cause, depth + 1, seen)
    if isinstance(cause, socket.gaierror):
        return Syscall("getaddrinfo")
    if isinstance(cause, (ConnectionRefusedError, TimeoutError)):
        return Operation("connect")
    if isinstance(cause, OSError) and cause.errno in _CONNECT_ERRNOS:
        return Operation("connect")
    return None


def inspect_error(err, depth=0, seen=None):
    """
    Reduce an exception (and what it wraps) to an inspected shape.

    Returns None for None input or when the chain is too deep / cyclic.
    """
    if seen is None:
        seen = set()
    if err is None or depth > MAX_CHAIN_DEPTH or id(err) in seen:
        return None
    seen.add(id(err))

    if _is_transport(err):
        inner = inspect_error(_wrapped(err), depth + 1, seen)
        if inner is None:
            return Message(str(err))
        return Transport(inner)

    if isinstance(err, NetOpError):
        return Operation(err.op, inspect_error(_wrapped(err), depth + 1, seen))
    if isinstance(err, SyscallError):
        return Syscall(err.syscall)

    # urllib3 connect-phase errors; NameResolutionError < NewConnectionError < ConnectTimeoutError
    if isinstance(err, NameResolutionError):
        return Operation(DIAL_OP, Syscall("getaddrinfo"))
    if isinstance(err, NewConnectionError):
        return Operation(DIAL_OP, _dial_cause(_chained(err), depth, seen))
    if isinstance(err, ConnectTimeoutError):
        return Operation(DIAL_OP, Operation("connect"))

    if isinstance(err, socket.gaierror):
        return Operation(DIAL_OP, Syscall("getaddrinfo"))
    if isinstance(err, ConnectionRefusedError):
        return Operation(DIAL_OP, Operation("connect"))
    if isinstance(err, (ssl.SSLError, Urllib3SSLError)):
        return Operation(LOCAL_ERROR_OP)
    # RemoteDisconnected is a ConnectionResetError too
    if isinstance(err, (ConnectionResetError, ConnectionAbortedError, BrokenPipeError)):
        return Operation("recv")
    if isinstance(err, ReadTimeoutError):
        return Operation("read")

    if isinstance(err, (EOFError, http.client.IncompleteRead)):
        return Sentinel()
    if isinstance(err, _MALFORMED_RESPONSE_ERRORS):
        # no common message for a garbled response; name it
        return Message(f"{MALFORMED_RESPONSE_PREFIX} {err!r}")

    return Message(str(err))


def decide(shape):
    """Map an inspected shape onto a BasicErrorType."""
    while isinstance(shape, Transport):
        shape = shape.inner

    if isinstance(shape, Operation):
        if shape.op == DIAL_OP:
            inner = shape.inner
            if isinstance(inner, Operation) and inner.op in CONNECT_OPS:
                return BasicErrorType.CANT_CONNECT_TO_HOST
            if isinstance(inner, Syscall) and inner.name in RESOLVE_SYSCALLS:
                return BasicErrorType.CANT_RESOLVE_HOST
            # unrecognized dial cause
            return BasicErrorType.CANT_RESOLVE_HOST
        if shape.op == LOCAL_ERROR_OP:
            return BasicErrorType.CANT_FIND_HOST
        if shape.op in RECEIVE_OPS:
            return BasicErrorType.UNEXPECTED_EOF
        return BasicErrorType.UNKNOWN

    if isinstance(shape, Sentinel):
        return BasicErrorType.UNEXPECTED_EOF

    if isinstance(shape, Message):
        if shape.text == TRANSPORT_CLOSED_MESSAGE:
            return BasicErrorType.UNEXPECTED_EOF
        if shape.text.startswith(MALFORMED_RESPONSE_PREFIX):
            return BasicErrorType.BAD_DATA_RECEIVED

    return BasicErrorType.UNKNOWN


def classify(err):
    """
    Classify err into a BasicError. Never raises.

    A BasicError passed in is returned as-is.
    """
    if isinstance(err, BasicError):
        return err

    try:
        shape = inspect_error(err)
        category = decide(shape)
    except Exception:
        logger.debug("classify: inspection failed for %s", type(err).__name__, exc_info=True)
        return BasicError(BasicErrorType.UNKNOWN, err)

    logger.debug("classify: %s %r -> %s (%s)", type(err).__name__, err, shape, category)
    return BasicError(category, err)


def is_connection_error(err):
    """True if err is a DNS / TLS / connect failure rather than a data problem."""
    return classify(err).category in CONNECTIVITY_CATEGORIES
