"""lazytext utility modules.

- logging: Standardized logging with human/verbose/JSON modes
"""

from lazytext.utils.logging import LogMode, get_logger, setup_logging

__all__ = [
    "LogMode",
    "get_logger",
    "setup_logging",
]
