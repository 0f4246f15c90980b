# whatnetwork/errors.py
"""
Exception types used by whatnetwork.

BasicError is the result of a classification. The other three describe a
failure in terms the classifier understands natively; use them to wrap
errors coming from HTTP stacks other than requests/urllib3.
"""

from .error_kinds import BasicErrorType


class BasicError(Exception):
    """
    A classified network failure.

    str() gives the category identifier; the original exception is kept in
    `cause` for debugging and is never re-interpreted.
    """

    def __init__(self, category, cause=None):
        category = BasicErrorType(category)
        super().__init__(category.value)
        self._category = category
        self._cause = cause

    @property
    def category(self):
        return self._category

    @property
    def cause(self):
        return self._cause

    def __str__(self):
        return self._category.value

    def __repr__(self):
        return f"BasicError({self._category.value!r}, cause={self._cause!r})"


class TransportError(Exception):
    """A request-level failure (method + url) wrapping the underlying error."""

    def __init__(self, method, url, err=None):
        super().__init__(method, url, err)
        self.method = method
        self.url = url
        self.err = err

    def __str__(self):
        return f'{self.method} "{self.url}": {self.err}'


class NetOpError(Exception):
    """
    A failed network operation.

    `op` is the operation label, e.g. "dial", "connect", "local error",
    "recv". `err` is the nested cause, possibly another NetOpError.
    """

    def __init__(self, op, err=None, net="tcp", addr=None):
        super().__init__(op, err)
        self.op = op
        self.err = err
        self.net = net
        self.addr = addr

    def __str__(self):
        s = f"{self.op} {self.net}"
        if self.addr:
            s += f" {self.addr}"
        if self.err is not None:
            s += f": {self.err}"
        return s


class SyscallError(Exception):
    """A failed system call, e.g. getaddrinfo."""

    def __init__(self, syscall, err=None):
        super().__init__(syscall, err)
        self.syscall = syscall
        self.err = err

    def __str__(self):
        return f"{self.syscall}: {self.err}"
