"""Logging setup for the r2resize command line.

Library modules only create loggers (``logging.getLogger(__name__)``); the
CLI picks one of three output modes for everything under "r2resize":
- Human mode: [LEVEL] message (colored if TTY)
- Verbose mode: [LEVEL][HH:MM:SS] logger: message
- CI/JSON mode: {"level":"...","ts":"...","logger":"...","msg":"..."}

Log output goes to stderr so that HTML rendered to stdout stays clean.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from enum import Enum
from typing import Any, TextIO

ROOT_LOGGER = "r2resize"


class LogMode(Enum):
    """Logging output mode."""

    HUMAN = "human"
    VERBOSE = "verbose"
    JSON = "json"


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"
    GRAY = "\033[90m"


LEVEL_COLORS = {
    logging.DEBUG: Colors.GRAY,
    logging.INFO: Colors.GREEN,
    logging.WARNING: Colors.YELLOW,
    logging.ERROR: Colors.RED,
    logging.CRITICAL: Colors.RED,
}


def _is_tty(stream: TextIO | None = None) -> bool:
    """Check if the stream is a TTY (supports colors)."""
    if stream is None:
        stream = sys.stderr
    return hasattr(stream, "isatty") and stream.isatty()


class HumanFormatter(logging.Formatter):
    """Formatter for human-readable output.

    Format: [LEVEL] message
    """

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self.use_colors = use_colors

    def level_tag(self, record: logging.LogRecord) -> str:
        """Bracketed level name, colored when enabled."""
        if not self.use_colors:
            return f"[{record.levelname}]"
        color = LEVEL_COLORS.get(record.levelno, Colors.RESET)
        return f"{color}[{record.levelname}]{Colors.RESET}"

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record."""
        return f"{self.level_tag(record)} {record.getMessage()}"


class VerboseFormatter(HumanFormatter):
    """Formatter for verbose output with timestamps and logger names.

    Format: [LEVEL][HH:MM:SS] r2resize.components.cards: message
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with timestamp and origin."""
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        line = f"{self.level_tag(record)}[{timestamp}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class JSONFormatter(logging.Formatter):
    """Formatter for JSON lines output (machine-readable)."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON."""
        log_entry: dict[str, Any] = {
            "level": record.levelname,
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "logger": record.name,
            "msg": record.getMessage(),
        }

        # Structured fields from R2ResizeLogger.structured()
        if hasattr(record, "extra_data"):
            log_entry.update(record.extra_data)

        if record.exc_info:
            log_entry["exc"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


class R2ResizeLogger(logging.Logger):
    """Logger with structured logging support."""

    def structured(self, level: int, msg: str, **kwargs: Any) -> None:
        """Log a message with additional structured data.

        In JSON mode the keyword arguments become top-level fields, e.g.
        ``logger.structured(logging.INFO, "Rendered", component="flex_card")``.

        Args:
            level: Log level
            msg: Log message
            **kwargs: Additional data to include in JSON output
        """
        if not self.isEnabledFor(level):
            return
        record = self.makeRecord(self.name, level, "(structured)", 0, msg, (), None)
        if kwargs:
            record.extra_data = kwargs  # type: ignore[attr-defined]
        self.handle(record)


logging.setLoggerClass(R2ResizeLogger)


def get_logger(name: str = ROOT_LOGGER) -> R2ResizeLogger:
    """Get an r2resize logger instance.

    Args:
        name: Logger name

    Returns:
        R2ResizeLogger instance
    """
    return logging.getLogger(name)  # type: ignore[return-value]


def setup_logging(
    mode: LogMode = LogMode.HUMAN,
    level: int = logging.INFO,
    stream: TextIO | None = None,
) -> None:
    """Configure the "r2resize" logger hierarchy.

    Args:
        mode: Output mode (human, verbose, json)
        level: Minimum log level
        stream: Output stream (default: stderr)
    """
    stream = stream or sys.stderr
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    # Replace handlers from a previous call
    logger.handlers.clear()

    use_colors = _is_tty(stream)
    if mode == LogMode.JSON:
        formatter: logging.Formatter = JSONFormatter()
    elif mode == LogMode.VERBOSE:
        formatter = VerboseFormatter(use_colors=use_colors)
    else:
        formatter = HumanFormatter(use_colors=use_colors)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def configure_from_cli(
    verbose: bool = False,
    quiet: bool = False,
    ci: bool = False,
) -> LogMode:
    """Configure logging based on CLI flags.

    Args:
        verbose: Debug messages with timestamps
        quiet: Warnings and errors only
        ci: JSON lines output for CI/CD

    Returns:
        The selected output mode
    """
    if ci:
        mode = LogMode.JSON
    elif verbose:
        mode = LogMode.VERBOSE
    else:
        mode = LogMode.HUMAN

    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    setup_logging(mode=mode, level=level)
    return mode
