"""r2resize utility modules.

- logging: CLI logging with human/verbose/JSON modes
"""

from r2resize.utils.logging import LogMode, configure_from_cli, get_logger, setup_logging

__all__ = ["LogMode", "configure_from_cli", "get_logger", "setup_logging"]
