# whatnetwork/http_check.py
"""
HTTP HEAD probe for whatnetwork.

Any HTTP response counts as reachable, whatever its status code; only
transport failures are errors.
"""

import time
import logging
import requests

from .classifier import classify
from .settings import get_probe_timeout

logger = logging.getLogger(__name__)


def probe(url, timeout=None):
    """
    Issue one HEAD request to url and return the status code.

    Raises whatever requests raises. requests.head closes its session on the
    way out; the response is closed here as well.
    """
    if timeout is None:
        timeout = get_probe_timeout()

    logger.debug("HEAD %s (timeout=%s)", url, timeout)
    resp = requests.head(url, timeout=timeout, allow_redirects=True)
    try:
        return resp.status_code
    finally:
        resp.close()


def run_head(url, timeout=None):
    """
    Probe url and return a result dict instead of raising.

    error_kind is the BasicErrorType value of the failure, or "ok".
    """
    start = time.monotonic()
    status_code = None
    ok = False
    error = None
    error_kind = "ok"
    cause = None

    try:
        status_code = probe(url, timeout=timeout)
        ok = True
    except Exception as e:
        basic = classify(e)
        error = str(e)
        error_kind = basic.category.value
        cause = basic.cause
        logger.debug("HEAD %s failed: %s (%s)", url, error_kind, error)

    return {
        "url": url,
        "ok": ok,
        "status_code": status_code,
        "http_ms": (time.monotonic() - start) * 1000.0,
        "error": error,
        "error_kind": error_kind,
        "cause": cause,
    }

