# whatnetwork/cli.py
"""
Simple command-line interface for whatnetwork.

Examples:
  python3 -m whatnetwork.cli check
  python3 -m whatnetwork.cli check --host https://example.com --timeout 2
  python3 -m whatnetwork.cli classify http://192.168.1.126:8282
"""

import argparse
import sys
import logging

from .logging_setup import setup_logging
from . import connection_check
from . import http_check
from .error_kinds import ConnectionStatus

LOG = logging.getLogger("whatnetwork.cli")

EXIT_OK = 0
EXIT_NOT_CONNECTED = 1
EXIT_ERROR = 2


def build_parser():
    p = argparse.ArgumentParser(prog="whatnetwork")
    p.add_argument("-v", "--verbose", action="store_true", help="Show how each error chain was classified")
    sub = p.add_subparsers(dest="cmd")

    # check
    c = sub.add_parser("check", help="Check basic internet connectivity")
    c.add_argument("--host", default="", help="Extra URL to HEAD after the well-known host")
    c.add_argument("--timeout", type=float, default=None, help="Seconds per HEAD probe")

    # classify
    k = sub.add_parser("classify", help="HEAD a URL and print what kind of failure it was")
    k.add_argument("url")
    k.add_argument("--timeout", type=float, default=None, help="Seconds for the HEAD request")

    return p


def run_check(host="", timeout=None):
    try:
        status = connection_check.check_connection_and_host(host, probe_timeout=timeout)
    except Exception as e:
        LOG.error("Connection check failed: %s", e)
        return EXIT_ERROR

    print(status.value)
    return EXIT_OK if status == ConnectionStatus.CONNECTED else EXIT_NOT_CONNECTED


def run_classify(url, timeout=None):
    res = http_check.run_head(url, timeout=timeout)
    if res["ok"]:
        print(f"{url}: HTTP {res['status_code']} ({res['http_ms']:.0f} ms)")
        return EXIT_OK

    print(f"{url}: {res['error_kind']}")
    LOG.info("Cause: %s", res["error"])
    return EXIT_NOT_CONNECTED


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    if args.cmd == "check":
        return run_check(host=args.host, timeout=args.timeout)

    if args.cmd == "classify":
        return run_classify(args.url, timeout=args.timeout)

    parser.print_help()
    return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
