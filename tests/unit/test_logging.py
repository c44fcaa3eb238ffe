"""Unit tests for CLI logging setup."""

import io
import json
import logging

from r2resize.utils.logging import (
    HumanFormatter,
    JSONFormatter,
    LogMode,
    R2ResizeLogger,
    VerboseFormatter,
    configure_from_cli,
    get_logger,
    setup_logging,
)


def _record(msg: str = "hello", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord("r2resize.test", level, __file__, 1, msg, (), None)


class TestFormatters:
    """Tests for the log formatters."""

    def test_human(self) -> None:
        """Test the human format without colors."""
        assert HumanFormatter(use_colors=False).format(_record()) == "[INFO] hello"

    def test_human_colors(self) -> None:
        """Test that colors wrap the level tag."""
        line = HumanFormatter(use_colors=True).format(_record(level=logging.WARNING))

        assert line.startswith("\033[33m[WARNING]")
        assert line.endswith(" hello")

    def test_verbose(self) -> None:
        """Test the verbose format with timestamp and logger name."""
        line = VerboseFormatter(use_colors=False).format(_record())

        assert line.startswith("[INFO][")
        assert line.endswith("] r2resize.test: hello")

    def test_json(self) -> None:
        """Test the JSON lines format."""
        entry = json.loads(JSONFormatter().format(_record("rendered")))

        assert entry["level"] == "INFO"
        assert entry["msg"] == "rendered"
        assert entry["logger"] == "r2resize.test"
        assert "ts" in entry


class TestSetupLogging:
    """Tests for setup_logging and configure_from_cli."""

    def test_json_mode_with_structured_fields(self) -> None:
        """Test structured fields in JSON output."""
        stream = io.StringIO()
        setup_logging(mode=LogMode.JSON, level=logging.DEBUG, stream=stream)

        logger = get_logger("r2resize.test.structured")
        assert isinstance(logger, R2ResizeLogger)
        logger.structured(logging.INFO, "Rendered", component="flex_card", items=3)

        entry = json.loads(stream.getvalue().strip())
        assert entry["msg"] == "Rendered"
        assert entry["component"] == "flex_card"
        assert entry["items"] == 3

    def test_level_filtering(self) -> None:
        """Test that the level applies to the r2resize hierarchy."""
        stream = io.StringIO()
        setup_logging(mode=LogMode.HUMAN, level=logging.WARNING, stream=stream)

        logging.getLogger("r2resize.components").info("quiet")
        logging.getLogger("r2resize.components").warning("loud")

        assert stream.getvalue() == "[WARNING] loud\n"

    def test_repeated_setup_replaces_handlers(self) -> None:
        """Test that handlers do not pile up."""
        setup_logging(stream=io.StringIO())
        setup_logging(stream=io.StringIO())

        assert len(logging.getLogger("r2resize").handlers) == 1

    def test_configure_from_cli(self) -> None:
        """Test flag to mode and level mapping."""
        assert configure_from_cli(ci=True) == LogMode.JSON
        assert configure_from_cli(verbose=True) == LogMode.VERBOSE
        assert logging.getLogger("r2resize").level == logging.DEBUG
        assert configure_from_cli(quiet=True) == LogMode.HUMAN
        assert logging.getLogger("r2resize").level == logging.WARNING
