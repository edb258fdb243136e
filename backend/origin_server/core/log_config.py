"""Process-wide logging setup."""
import logging
import sys

LOG_FORMAT = "%(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send application log lines to stdout.

    ``basicConfig`` is a no-op once the root logger has handlers, so calling
    this again (reloads, test harnesses) leaves the existing setup alone.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stdout)
