"""
Spin & Solve Configuration.

Environment variables, settings, and logging configuration.
"""

from spin_solve.config.logging import configure_logging
from spin_solve.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
