import ipaddress
import socket
from types import SimpleNamespace

import psutil
import pytest

from whatnetwork import net_utils
from whatnetwork.net_utils import Interface


def _addr(family, address):
    return SimpleNamespace(family=family, address=address, netmask=None, broadcast=None, ptp=None)


def _stats(isup):
    return SimpleNamespace(isup=isup, duplex=0, speed=0, mtu=1500, flags="")


def _patch_psutil(monkeypatch, addrs, stats):
    monkeypatch.setattr(net_utils.psutil, "net_if_addrs", lambda: addrs)
    monkeypatch.setattr(net_utils.psutil, "net_if_stats", lambda: stats)


def test_list_interfaces_parses_addresses(monkeypatch):
    addrs = {
        "lo": [_addr(socket.AF_INET, "127.0.0.1"), _addr(socket.AF_INET6, "::1")],
        "eth0": [
            _addr(psutil.AF_LINK, "aa:bb:cc:dd:ee:ff"),
            _addr(socket.AF_INET, "192.168.1.10"),
            _addr(socket.AF_INET6, "fe80::1%eth0"),
        ],
    }
    stats = {"lo": _stats(True), "eth0": _stats(True)}
    _patch_psutil(monkeypatch, addrs, stats)

    ifaces = net_utils.list_interfaces()

    assert [i.name for i in ifaces] == ["eth0", "lo"]
    eth0, lo = ifaces
    assert eth0.is_up is True
    assert "aa:bb:cc:dd:ee:ff" in eth0.addresses
    assert ipaddress.ip_address("192.168.1.10") in eth0.addresses
    assert ipaddress.ip_address("fe80::1") in eth0.addresses
    assert eth0.non_loopback_count() == 2
    assert lo.non_loopback_count() == 0


def test_interface_missing_stats_is_down_and_missing_addrs_is_empty(monkeypatch):
    addrs = {"tun0": [_addr(socket.AF_INET, "10.8.0.2")]}
    stats = {"wlan0": _stats(True)}
    _patch_psutil(monkeypatch, addrs, stats)

    ifaces = {i.name: i for i in net_utils.list_interfaces()}

    assert ifaces["tun0"].is_up is False
    assert ifaces["wlan0"].is_up is True
    assert ifaces["wlan0"].addresses == ()
    assert ifaces["wlan0"].non_loopback_count() == 0


def test_unparseable_ip_is_kept_as_string(monkeypatch):
    _patch_psutil(monkeypatch, {"eth0": [_addr(socket.AF_INET, "not-an-ip")]}, {"eth0": _stats(True)})

    (eth0,) = net_utils.list_interfaces()

    assert eth0.addresses == ("not-an-ip",)
    assert eth0.ip_addresses() == []


def test_no_interfaces(monkeypatch):
    _patch_psutil(monkeypatch, {}, {})
    assert net_utils.list_interfaces() == []


def test_enumeration_errors_propagate(monkeypatch):
    def boom():
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(net_utils.psutil, "net_if_addrs", boom)
    with pytest.raises(PermissionError):
        net_utils.list_interfaces()


def test_interface_counts_only_ip_addresses():
    iface = Interface(
        name="eth0",
        is_up=True,
        addresses=("00:11:22:33:44:55", ipaddress.ip_address("::1"), ipaddress.ip_address("8.8.4.4")),
    )
    assert iface.ip_addresses() == [ipaddress.ip_address("::1"), ipaddress.ip_address("8.8.4.4")]
    assert iface.non_loopback_count() == 1
