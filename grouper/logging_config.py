# grouper/logging_config.py
"""
Logging configuration for Grouper.

Developer Mode:
    Set environment variable: GROUPER_DEV_MODE=1
    This enables:
    - DEBUG level logging (every merge step is logged)
    - Colored console output
    - Timing logs for clustering runs
"""
import logging
import sys
import os
from typing import Optional


# ANSI color codes for terminal output
class LogColors:
    """ANSI color codes for colored logging."""
    RESET = "\033[0m"

    # Levels
    DEBUG = "\033[36m"      # Cyan
    INFO = "\033[32m"       # Green
    WARNING = "\033[33m"    # Yellow
    ERROR = "\033[31m"      # Red
    CRITICAL = "\033[35m"   # Magenta

    # Special markers
    FAIL = "\033[1;31m"     # Bold Red
    TIMING = "\033[35m"     # Magenta


class ColoredFormatter(logging.Formatter):
    """
    Formatter that adds colors to console output.

    Only adds colors when outputting to a TTY (not when piped to file).
    """

    LEVEL_COLORS = {
        logging.DEBUG: LogColors.DEBUG,
        logging.INFO: LogColors.INFO,
        logging.WARNING: LogColors.WARNING,
        logging.ERROR: LogColors.ERROR,
        logging.CRITICAL: LogColors.CRITICAL,
    }

    def __init__(self, *args, use_colors: bool = True, **kwargs):
        super().__init__(*args, **kwargs)
        self.use_colors = use_colors and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().format(record)

        # Other handlers share the record, so every change is undone below
        original = (record.levelname, record.msg, record.args)
        levelname = record.levelname
        if record.levelno in self.LEVEL_COLORS:
            color = self.LEVEL_COLORS[record.levelno]
            record.levelname = f"{color}{levelname}{LogColors.RESET}"

        message = record.getMessage()
        if "START" in message or "DONE" in message:
            message = f"{LogColors.TIMING}{message}{LogColors.RESET}"
        elif "FAILED" in message:
            message = f"{LogColors.FAIL}{message}{LogColors.RESET}"

        record.msg = message
        record.args = ()
        try:
            return super().format(record)
        finally:
            record.levelname, record.msg, record.args = original


def is_dev_mode() -> bool:
    """
    Check if developer mode is enabled.

    Returns:
        True if GROUPER_DEV_MODE environment variable is set to 1, yes, or true
    """
    dev_mode = os.getenv('GROUPER_DEV_MODE', '').lower()
    return dev_mode in ('1', 'yes', 'true', 'on')


def setup_logging(
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
    use_colors: bool = True
) -> logging.Logger:
    """
    Configure logging for the grouper package.

    Log records go to stderr so that rendered clusters on stdout stay clean.

    Args:
        level: Logging level (default: WARNING, or DEBUG if dev mode enabled)
        log_file: Optional file path for log output
        format_string: Custom format string for log messages
        use_colors: Whether to use colored output (default: True)

    Returns:
        Configured logger instance
    """
    dev_mode = is_dev_mode()

    if level is None:
        level = logging.DEBUG if dev_mode else logging.WARNING

    if format_string is None:
        if dev_mode:
            format_string = '[%(asctime)s] %(levelname)-8s | %(name)-28s | %(message)s'
        else:
            format_string = '[%(asctime)s] %(levelname)s - %(name)s - %(message)s'

    logger = logging.getLogger('grouper')
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    if use_colors:
        formatter = ColoredFormatter(format_string, datefmt='%H:%M:%S')
    else:
        formatter = logging.Formatter(format_string, datefmt='%Y-%m-%d %H:%M:%S')

    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler (optional) - never colored
    if log_file:
        file_formatter = logging.Formatter(
            '[%(asctime)s] %(levelname)s - %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    if dev_mode:
        logger.info("DEVELOPER MODE ENABLED - Verbose logging active")

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Short module name (e.g. 'clustering_service')

    Returns:
        Logger instance
    """
    return logging.getLogger(f'grouper.{name}')

