"""Unified logging for overlaykit with console and file output."""
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

console = Console()

# Log file configuration
LOG_DIR = Path("/var/log/overlaykit")
LOG_FILE = LOG_DIR / "overlaykit.log"
FALLBACK_LOG_FILE = Path("/tmp/overlaykit.log")

# Track if file logging has been set up
_file_logging_configured = False


def setup_file_logging(log_file: str = None, verbose: bool = False):
    """Set up file logging for overlaykit operations.

    Args:
        log_file: Path to log file (defaults to /var/log/overlaykit/overlaykit.log)
        verbose: Enable debug-level logging

    Note:
        Creates log directory if it doesn't exist.
        Falls back to /tmp if /var/log/overlaykit is not writable.
    """
    global _file_logging_configured

    if _file_logging_configured:
        return

    target_log_file = Path(log_file) if log_file else LOG_FILE

    try:
        target_log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(target_log_file)
    except PermissionError:
        target_log_file = FALLBACK_LOG_FILE
        target_log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(target_log_file)

    root_logger = logging.getLogger("overlaykit")
    file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)

    file_formatter = logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)

    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Module loggers from get_logger() pin INFO; lower them too
    if verbose:
        for name, existing in logging.root.manager.loggerDict.items():
            if name.startswith("overlaykit.") and isinstance(existing, logging.Logger):
                existing.setLevel(logging.DEBUG)

    _file_logging_configured = True

    root_logger.info(f"overlaykit logging initialized: {target_log_file}")


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger instance with console output.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger with Rich console handler

    Note:
        File logging must be enabled separately via setup_file_logging()
    """
    logger = logging.getLogger(name)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger
