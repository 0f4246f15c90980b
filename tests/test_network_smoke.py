# Real-network checks; opt in with WHATNETWORK_ONLINE_TESTS=1
import os
import pytest

from whatnetwork import check_connection, classify
from whatnetwork import http_check
from whatnetwork.error_kinds import BasicErrorType, ConnectionStatus

pytestmark = pytest.mark.skipif(
    not os.environ.get("WHATNETWORK_ONLINE_TESTS"),
    reason="set WHATNETWORK_ONLINE_TESTS=1 to run tests that hit the network",
)


def test_check_connection_smoke():
    assert check_connection(probe_timeout=5.0) in set(ConnectionStatus)


def test_unresolvable_host_smoke():
    res = http_check.run_head("http://does-not-exist.invalid/", timeout=3.0)
    assert res["ok"] is False
    assert res["error_kind"] == BasicErrorType.CANT_RESOLVE_HOST.value


def test_refused_port_smoke():
    try:
        http_check.probe("http://127.0.0.1:9/", timeout=2.0)
    except Exception as e:
        assert classify(e).category == BasicErrorType.CANT_CONNECT_TO_HOST
    else:
        pytest.skip("something is listening on 127.0.0.1:9")
