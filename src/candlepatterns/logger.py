"""
Logging infrastructure for the candlepatterns package.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves. ``setup_logger`` (usually reached through
``Config.apply``) attaches handlers to the package logger; records carry
optional ``symbol``/``pattern`` context added by ``PatternLoggerAdapter``.
"""

import logging
import logging.handlers
import re
import sys
from pathlib import Path
from typing import Optional


PACKAGE_LOGGER = "candlepatterns"

CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_SIZE_UNITS = {'': 1, 'B': 1, 'KB': 1024, 'MB': 1024 ** 2, 'GB': 1024 ** 3}
_SIZE_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*([KMG]?B)?")


class ColoredFormatter(logging.Formatter):
    """Console formatter coloring the level name."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        # Work on a copy; other handlers share the record
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname)
        if color:
            record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class StructuredFormatter(logging.Formatter):
    """File formatter prefixing the message with symbol and pattern context."""

    def format(self, record: logging.LogRecord) -> str:
        record = logging.makeLogRecord(record.__dict__)
        context = [getattr(record, key) for key in ('symbol', 'pattern') if hasattr(record, key)]
        if context:
            record.msg = " ".join(f"[{value}]" for value in context) + f" {record.msg}"
        return super().format(record)


def parse_size(size: str) -> int:
    """
    Parse a size such as '10MB', '512 KB' or '2048' into bytes.

    Raises:
        ValueError: If the size is not a number with an optional B/KB/MB/GB unit
    """
    match = _SIZE_PATTERN.fullmatch(size.strip().upper())
    if match is None:
        raise ValueError(f"Invalid size: {size!r}")
    number, unit = match.groups()
    return int(float(number) * _SIZE_UNITS[unit or ''])


def setup_logger(
    level: str = "INFO",
    log_file: Optional[str] = None,
    max_size: str = "10MB",
    backup_count: int = 5,
    console_output: bool = True
) -> logging.Logger:
    """
    Route package log records to the console and/or a rotating file.

    Replaces handlers installed by an earlier call and stops propagation to
    the root logger.

    Args:
        level: Logging level name
        log_file: Path of the rotating log file, created with its parents
        max_size: File size before rotation, see ``parse_size``
        backup_count: Number of rotated files kept
        console_output: Whether to log to stdout

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=parse_size(max_size),
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setFormatter(StructuredFormatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """The package logger, or its child ``candlepatterns.<name>``."""
    if name is None:
        return logging.getLogger(PACKAGE_LOGGER)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


class PatternLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter adding symbol/pattern context to records."""

    def process(self, msg: str, kwargs: dict) -> tuple:
        kwargs['extra'] = {**self.extra, **kwargs.get('extra', {})}
        return msg, kwargs


def get_pattern_adapter(
    logger: Optional[logging.Logger] = None,
    symbol: Optional[str] = None,
    pattern: Optional[str] = None
) -> PatternLoggerAdapter:
    """
    Wrap ``logger`` (default: the package logger) with pattern context.

    Context values left as ``None`` are omitted from records.
    """
    extra = {key: value for key, value in (('symbol', symbol), ('pattern', pattern)) if value}
    return PatternLoggerAdapter(logger or get_logger(), extra)
