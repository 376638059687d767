# pet_identity_validator/infrastructure/logging/_setup.py

"""Logging setup for services that embed the validator

Field matchers write one DEBUG line per comparison. Those lines form the audit
trail of a verdict and always reach the log file, whatever the console level.
"""

# Standard library imports
from datetime import datetime
from logging import DEBUG
from logging import FileHandler
from logging import Formatter
from logging import Handler
from logging import INFO
from logging import StreamHandler
from logging import getLevelName
from logging import getLogger
from os import makedirs
from os.path import join
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    # Local imports
    from pet_identity_validator.infrastructure.config import ConfigLoader

LOG_DIR = "logs"
CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
AUDIT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_default_log_path(log_dir: str = LOG_DIR) -> str:
    """Timestamped audit log path for one validator process

    Args:
        log_dir: Directory for log files, created when missing

    Returns:
        Path such as ``logs/pet_validator_20261019_143052.log``
    """
    makedirs(log_dir, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return join(log_dir, f"pet_validator_{stamp}.log")


def _configure(handler: Handler, level: int, fmt: str) -> Handler:
    handler.setLevel(level)
    handler.setFormatter(Formatter(fmt))
    return handler


def _resolve_level(log_level: str) -> int:
    """Convert a level name to its logging constant, defaulting to INFO"""
    level = getLevelName(log_level.upper())
    return level if isinstance(level, int) else INFO


def set_up_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    silent: bool = False,
    disable_file_logging: bool = False,
) -> str | None:
    """Route validator logs to the console and an audit file

    Args:
        log_file: Audit log path, generated under ``logs/`` when None
        log_level: Console level name (DEBUG, INFO, WARNING, ERROR)
        silent: Skip the console handler
        disable_file_logging: Skip the audit file

    Returns:
        Audit log path, or None when file logging is disabled
    """
    console_level = _resolve_level(log_level)

    root_logger = getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if not silent:
        root_logger.addHandler(_configure(StreamHandler(), console_level, CONSOLE_FORMAT))

    if disable_file_logging:
        root_logger.setLevel(console_level)
        return None

    # The audit file needs DEBUG records even when the console shows less
    root_logger.setLevel(DEBUG)
    log_file = log_file or get_default_log_path()
    root_logger.addHandler(
        _configure(FileHandler(log_file, encoding="utf-8"), DEBUG, AUDIT_FORMAT)
    )

    getLogger(__name__).info(f"Validation audit log: {log_file}")
    return log_file


def set_up_logging_from_config(config: "ConfigLoader", silent: bool = False) -> str | None:
    """Configure logging from the ``logging`` section of the app config

    Args:
        config: Configuration loader
        silent: If True, suppress console output

    Returns:
        Path to log file if one was configured, None otherwise
    """
    return set_up_logging(
        log_file=config.logging.log_file,
        log_level="DEBUG" if config.logging.debug else "INFO",
        silent=silent,
        disable_file_logging=config.logging.log_file is None,
    )
