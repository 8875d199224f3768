import logging
import sys
from datetime import datetime
from enum import Enum
from typing import Optional, TextIO

from colorama import Fore, Style
from pydantic import BaseModel, ConfigDict

from core import config

SUCCESS_LEVEL = 25
logging.addLevelName(SUCCESS_LEVEL, "SUCCESS")


class Severity(str, Enum):
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR   = "ERROR"

    @property
    def level(self) -> int:
        return SEVERITY_LEVELS[self]


SEVERITY_LEVELS: dict[Severity, int] = {
    Severity.SUCCESS: SUCCESS_LEVEL,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR:   logging.ERROR,
}

SEVERITY_COLORS: dict[Severity, str] = {
    Severity.SUCCESS: Fore.GREEN,
    Severity.WARNING: Fore.YELLOW,
    Severity.ERROR:   Fore.RED,
}


class LogOptions(BaseModel):
    """Per-call logging options. By default a line only goes to the console."""

    model_config = ConfigDict(frozen=True)

    log_to_file: bool = False


class SearchFormatter(logging.Formatter):
    """Renders ``[<date> - <time> <SEVERITY>: <message>]`` using the host locale."""

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        created = datetime.fromtimestamp(record.created)
        return f"{created.strftime('%x')} - {created.strftime('%X')}"

    def format(self, record: logging.LogRecord) -> str:
        ts = self.formatTime(record)
        return f"[{ts} {record.levelname}: {record.getMessage()}]"


class ColorFormatter(SearchFormatter):

    _LEVEL_COLORS = {SEVERITY_LEVELS[sev]: color for sev, color in SEVERITY_COLORS.items()}

    def format(self, record: logging.LogRecord) -> str:
        color = self._LEVEL_COLORS.get(record.levelno, "")
        return f"{color}{super().format(record)}{Style.RESET_ALL}"


class _FileFlagFilter(logging.Filter):
    """Only lets through records logged with ``log_to_file`` set."""

    def filter(self, record: logging.LogRecord) -> bool:
        return bool(getattr(record, "log_to_file", False))


class AppendFileHandler(logging.FileHandler):
    """
    Append-only file handler that does not swallow I/O errors.

    Errors raised by emit() are re-raised to the logging caller rather than
    printed to stderr.
    """

    def __init__(self, filename: str) -> None:
        super().__init__(filename, mode="a", encoding="utf-8", delay=True)

    def handleError(self, record: logging.LogRecord) -> None:
        raise


class SearchLogger:
    """
    Console + optional file logger for product lookups.

    Both destinations are injected: ``stream`` defaults to stdout and
    ``log_file`` to the configured path.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        log_file: Optional[str] = None,
        name: Optional[str] = None,
    ) -> None:
        self.log_file = log_file or config.LOG_FILE_PATH
        # Private logger, not in the logging registry: each instance owns its destinations.
        self._log = logging.Logger(name or config.LOGGER_NAME, logging.DEBUG)
        self._log.propagate = False

        # File first, so a failed append leaves the console untouched.
        self._file_handler = AppendFileHandler(self.log_file)
        self._file_handler.setFormatter(SearchFormatter())
        self._file_handler.addFilter(_FileFlagFilter())
        self._log.addHandler(self._file_handler)

        console = logging.StreamHandler(stream or sys.stdout)
        console.setFormatter(ColorFormatter())
        self._log.addHandler(console)

    def log_search(
        self,
        severity: Severity,
        message: str,
        options: LogOptions = LogOptions(),
        product_id: Optional[int] = None,
    ) -> None:
        """
        Write one line for a lookup outcome.

        ``product_id`` is the id that was searched for; it travels on the
        log record for handlers that want it and is not part of the line.
        """
        self._log.log(
            severity.level,
            message,
            extra={
                "log_to_file": options.log_to_file,
                "product_id":  product_id,
            },
        )

    def close(self) -> None:
        for handler in list(self._log.handlers):
            self._log.removeHandler(handler)
            handler.close()
