"""
Spin & Solve - Logging Configuration
"""

import logging

from spin_solve.config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(settings: Settings | None = None) -> None:
    """Configure the root logger from settings. DEBUG wins over log_level.

    Raises:
        ValueError: If log_level is not a standard level name
    """
    settings = settings or get_settings()
    if settings.debug:
        level = logging.DEBUG
    else:
        # getLevelName maps a registered name to its number, anything else to a string
        level = logging.getLevelName(settings.log_level)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level {settings.log_level!r}")
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("spin_solve").setLevel(level)
