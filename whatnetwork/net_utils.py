"""
whatnetwork/net_utils.py

Snapshot of the host's network interfaces.

Each interface carries its "up" flag and its assigned addresses. IPv4/IPv6
addresses are parsed into `ipaddress` objects; anything else (link-layer
MACs and the like) is kept as the raw string so callers can tell them apart.

Enumeration errors (psutil.Error, OSError) are not caught here: failing to
read the interface table is a local fault, not a network fact.
"""
import ipaddress
import logging
import socket
from dataclasses import dataclass, field

import psutil

LOG = logging.getLogger("whatnetwork.net_utils")

_IP_FAMILIES = (socket.AF_INET, socket.AF_INET6)


@dataclass(frozen=True)
class Interface:
    name: str
    is_up: bool
    addresses: tuple = field(default_factory=tuple)

    def ip_addresses(self):
        return [a for a in self.addresses if not isinstance(a, str)]

    def non_loopback_count(self):
        return sum(1 for a in self.ip_addresses() if not a.is_loopback)


def _parse_address(family, address):
    """
    Return an ipaddress object for IP families, else the raw string.

    IPv6 link-local addresses may carry a "%scope" suffix; strip it first.
    """
    if family not in _IP_FAMILIES:
        return address
    try:
        return ipaddress.ip_address(address.split("%", 1)[0])
    except ValueError:
        LOG.debug("Unparseable %s address %r, treating as non-IP", family, address)
        return address


def list_interfaces():
    """
    Return a fresh list of Interface snapshots, sorted by name.

    An interface that psutil reports addresses for but no stats is treated
    as down; one with stats but no addresses has an empty address tuple.
    """
    addrs = psutil.net_if_addrs()
    stats = psutil.net_if_stats()

    interfaces = []
    for name in sorted(set(addrs) | set(stats)):
        st = stats.get(name)
        is_up = bool(st.isup) if st is not None else False
        parsed = tuple(_parse_address(a.family, a.address) for a in addrs.get(name, ()))
        interfaces.append(Interface(name=name, is_up=is_up, addresses=parsed))

    LOG.debug("Found %d interface(s): %s", len(interfaces), [i.name for i in interfaces])
    return interfaces
