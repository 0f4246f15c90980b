# whatnetwork/logging_setup.py
"""
Logging setup for the whatnetwork CLI.

The library itself only creates module loggers under "whatnetwork"; this is
for programs (the CLI, scripts) that want output on the console.
"""

import logging
import os

from .settings import LOG_LEVEL_ENV

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# urllib3 logs every new connection at DEBUG; keep it out of verbose output
QUIET_LOGGERS = ("urllib3",)


def setup_logging(level="INFO", verbose=False):
    """
    Configure console logging once.

    - WHATNETWORK_LOG_LEVEL overrides `level` for the root logger
    - verbose=True turns on DEBUG for the "whatnetwork" loggers only, so the
      classifier's error-chain traces show up without third-party noise
    - an already configured root logger is left alone; `verbose` still applies
    """
    pkg = logging.getLogger("whatnetwork")
    if verbose:
        pkg.setLevel(logging.DEBUG)
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    root = logging.getLogger()
    if root.handlers:
        return

    level_name = os.environ.get(LOG_LEVEL_ENV, level).upper()
    level_value = getattr(logging, level_name, None)
    if not isinstance(level_value, int):
        level_value = logging.INFO

    handler = logging.StreamHandler()
    if verbose:
        handler.setLevel(logging.DEBUG)
    logging.basicConfig(level=level_value, format=LOG_FORMAT, handlers=[handler])
