import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.config_loader import ConfigLoader
from .status import STATUS_LOGGER_NAME

DEFAULT_LOG_FORMAT = '%(asctime)s - %(levelname)s - [%(name)s] - %(message)s'
DEFAULT_STATUS_FORMAT = '[%(levelname)s] %(message)s'
DEFAULT_LOG_FILE = 'logs/chromedriver_ctl.log'


class StatusFormatter(logging.Formatter):
    """
    Renders status records (info / OK / error lines meant for the operator)
    with a short format, and every other record with the full one.
    """

    def __init__(self, fmt: str, status_fmt: str):
        super().__init__(fmt)
        self.status_formatter = logging.Formatter(status_fmt)

    def format(self, record: logging.LogRecord) -> str:
        if record.name == STATUS_LOGGER_NAME or record.name.startswith(STATUS_LOGGER_NAME + '.'):
            return self.status_formatter.format(record)
        return super().format(record)


def _resolve_level(name: Any, fallback: int) -> int:
    """Map 'DEBUG', 'OK', 25 etc. to a level number; unknown names give `fallback`."""
    if isinstance(name, int):
        return name
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else fallback


def _console_handler(config: Dict[str, Any], log_level: int, log_format: str, status_format: str) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(_resolve_level(config.get('level', log_level), log_level))
    handler.setFormatter(StatusFormatter(
        config.get('format', log_format),
        config.get('status_format', status_format),
    ))
    return handler


def _file_handler(config: Dict[str, Any], log_level: int, log_format: str) -> Optional[logging.Handler]:
    # Relative paths resolve against the working directory, like the settings file
    log_file_path = Path(config.get('path', DEFAULT_LOG_FILE))
    try:
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        # Logger is not set up yet, so report on stderr
        print(f"Error: Could not create log directory {log_file_path.parent}. File logging disabled. Error: {e}", file=sys.stderr)
        return None

    rotation_type = config.get('rotation_type', None)  # 'size', 'time' or None
    if rotation_type == 'size':
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            log_file_path,
            maxBytes=int(config.get('max_bytes', 1024 * 1024 * 5)),
            backupCount=int(config.get('backup_count', 5)),
            encoding='utf-8',
        )
    elif rotation_type == 'time':
        handler = logging.handlers.TimedRotatingFileHandler(
            log_file_path,
            when=config.get('when', 'midnight'),
            interval=int(config.get('interval', 1)),
            backupCount=int(config.get('backup_count', 5)),
            encoding='utf-8',
        )
    else:
        handler = logging.FileHandler(log_file_path, encoding='utf-8')

    handler.setLevel(_resolve_level(config.get('level', log_level), log_level))
    # Files keep full context for status lines too
    handler.setFormatter(logging.Formatter(config.get('format', log_format)))
    return handler


def setup_logger(config_loader: Optional[ConfigLoader] = None, logger_name: Optional[str] = None) -> logging.Logger:
    """
    Sets up a logger (root logger by default) from the 'logging' settings block.

    Status lines from `Status` print as '[OK] Starting ChromeDriver...' on the
    console; everything else uses the regular format. Call once at startup;
    calling again replaces the handlers instead of stacking them.
    """
    if config_loader is None:
        config_loader = ConfigLoader()

    log_level = _resolve_level(config_loader.get_logging_setting('level', 'INFO'), logging.INFO)
    log_format = config_loader.get_logging_setting('format', DEFAULT_LOG_FORMAT)
    status_format = config_loader.get_logging_setting('status_format', DEFAULT_STATUS_FORMAT)

    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    if logger_name is not None:
        logger.propagate = bool(config_loader.get_logging_setting('propagate', False))

    console_config = config_loader.get_logging_setting('console_handler', {})
    if console_config.get('enabled', True):
        logger.addHandler(_console_handler(console_config, log_level, log_format, status_format))

    file_config = config_loader.get_logging_setting('file_handler', {})
    if file_config.get('enabled', False):
        file_handler = _file_handler(file_config, log_level, log_format)
        if file_handler:
            logger.addHandler(file_handler)

    # Both handlers disabled: avoid "No handlers could be found" warnings.
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
