# whatnetwork/connection_check.py
"""
Basic internet connectivity check.

An interface is up, it has a non-loopback IP, and the well-known probe host
(plus an optional caller URL) answers a HEAD request.

- check_connection_and_host(...) returns a ConnectionStatus.
- Local faults (interface enumeration) and probe failures that are not
  connectivity problems are raised unchanged rather than turned into a status.
"""

import logging

from . import http_check
from . import net_utils
from . import settings
from .classifier import classify
from .error_kinds import CONNECTIVITY_CATEGORIES, ConnectionStatus

logger = logging.getLogger(__name__)


def interface_status(interfaces):
    """
    Pure function: given an interface snapshot, return a failing
    ConnectionStatus, or None if probing should go ahead.
    """
    if not interfaces:
        return ConnectionStatus.NO_INTERFACES

    up = [i for i in interfaces if i.is_up]
    if not up:
        return ConnectionStatus.NO_INTERFACES_UP

    non_loopback = sum(i.non_loopback_count() for i in up)
    logger.debug("%d interface(s) up, %d non-loopback address(es)", len(up), non_loopback)
    if non_loopback == 0:
        return ConnectionStatus.NO_NON_LOOPBACKS_FOUND

    return None


def probe_targets(extra_url=""):
    targets = [settings.PROBE_URL]
    if extra_url:
        targets.append(extra_url)
    return targets


def check_connection_and_host(extra_url="", probe_timeout=None):
    """
    Check interfaces, then HEAD the probe host and extra_url (if given).

    Returns ConnectionStatus.NO_INTERNET on the first probe that fails with a
    DNS / TLS / connect failure, without probing further targets. Any other
    probe failure is re-raised as-is.
    """
    status = interface_status(net_utils.list_interfaces())
    if status is not None:
        logger.info("Connection check: %s", status)
        return status

    if probe_timeout is None:
        probe_timeout = settings.get_probe_timeout()

    for url in probe_targets(extra_url):
        try:
            http_check.probe(url, timeout=probe_timeout)
        except Exception as e:
            basic = classify(e)
            if basic.category in CONNECTIVITY_CATEGORIES:
                logger.info("Connection check: probe of %s failed with %s", url, basic.category)
                return ConnectionStatus.NO_INTERNET
            logger.debug("Probe of %s failed with %s; not a connectivity problem", url, basic.category)
            raise

    logger.info("Connection check: %s", ConnectionStatus.CONNECTED)
    return ConnectionStatus.CONNECTED


def check_connection(probe_timeout=None):
    return check_connection_and_host("", probe_timeout=probe_timeout)
