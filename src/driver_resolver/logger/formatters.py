"""Logging formatters for console output.

- ColoredConsoleFormatter: Adds ANSI color codes to log levels
- SimpleConsoleFormatter: Shows only message content
- HybridConsoleFormatter: Simple format for INFO, structured for others
"""

import logging

from driver_resolver.constants import LOG_COLORS


class ColoredConsoleFormatter(logging.Formatter):
    """Console formatter with ANSI color support for log level names."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with a colored level name.

        The record's levelname is swapped for the colored variant only for
        the duration of the parent format() call.

        Args:
            record: The log record to format

        Returns:
            Formatted log message

        """
        if record.levelname in LOG_COLORS:
            color = LOG_COLORS[record.levelname]
            reset = LOG_COLORS["RESET"]
            original_levelname = record.levelname
            record.levelname = f"{color}{record.levelname}{reset}"
            try:
                return super().format(record)
            finally:
                record.levelname = original_levelname

        return super().format(record)


class SimpleConsoleFormatter(logging.Formatter):
    """Minimal console formatter that only shows the message content."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


class HybridConsoleFormatter(logging.Formatter):
    """Console formatter with simple format for INFO, structured for others.

    Example Output:
        INFO:     "geckodriver v0.35.0"
        WARNING:  "12:30:45 - driver_resolver - WARNING - Using cached release"

    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
    ) -> None:
        """Initialize hybrid formatter.

        Args:
            fmt: Format string for structured messages
            datefmt: Date format string for timestamps

        """
        super().__init__(fmt, datefmt)
        self._simple_formatter = SimpleConsoleFormatter()
        self._colored_formatter = ColoredConsoleFormatter(fmt, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno == logging.INFO:
            return self._simple_formatter.format(record)
        return self._colored_formatter.format(record)
