# whatnetwork/settings.py
"""
Runtime settings for whatnetwork.

Keep it simple: module constants plus a couple of environment overrides,
read at call time (no import-time freezing) so tests and callers can
monkeypatch either.

  WHATNETWORK_PROBE_TIMEOUT  seconds per HEAD probe (positive float)
  WHATNETWORK_LOG_LEVEL      see logging_setup.setup_logging
"""

import logging
import os

logger = logging.getLogger(__name__)

# Always probed first by the connectivity check
PROBE_URL = "http://www.google.com"

DEFAULT_PROBE_TIMEOUT = 5.0

PROBE_TIMEOUT_ENV = "WHATNETWORK_PROBE_TIMEOUT"
LOG_LEVEL_ENV = "WHATNETWORK_LOG_LEVEL"


def get_probe_timeout(default=None):
    """
    Per-probe timeout in seconds.

    Uses WHATNETWORK_PROBE_TIMEOUT if set to a positive number, otherwise
    `default` (or DEFAULT_PROBE_TIMEOUT).
    """
    if default is None:
        default = DEFAULT_PROBE_TIMEOUT

    raw = os.environ.get(PROBE_TIMEOUT_ENV)
    if not raw:
        return default
    try:
        value = float(raw.strip())
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number", PROBE_TIMEOUT_ENV, raw)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive", PROBE_TIMEOUT_ENV, raw)
        return default
    return value
