"""
Logging configuration for command-line entry points.

Log records go to stderr (and optionally a file) so stdout stays free for
tool results.
"""

import logging
import sys

from market_indicators.core.config import IndicatorSettings

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def configure_logging(settings: IndicatorSettings) -> None:
    """
    Configure root logging from settings.

    Has no effect if the root logger already has handlers; in that case no
    handler (and no log file) is created.

    Args:
        settings: Settings providing log_level and log_file
    """
    if logging.getLogger().handlers:
        return

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file))

    logging.basicConfig(
        level=settings.log_level,
        format=LOG_FORMAT,
        handlers=handlers,
    )
