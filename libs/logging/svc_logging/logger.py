"""svc centralized logger."""

import logging
from pathlib import Path
from typing import Any

from svc_logging.formatters import LogfmtFormatter
from svc_logging.handlers import BACKUP_COUNT, MAX_LOG_BYTES, build_handlers

DEFAULT_LOG_DIR = Path.home() / '.svc' / 'logs'


class SvcLogger:
    """Centralized logger for svc components."""

    def __init__(
        self,
        name: str,
        log_dir: Path | None = None,
        level: str = "INFO",
        max_file_size: int = MAX_LOG_BYTES,
        backup_count: int = BACKUP_COUNT,
        enable_syslog: bool = False,
        enable_console: bool = False
    ):
        """Initialize svc logger.

        Args:
            name: Logger name (will be prefixed with 'svc.')
            log_dir: Directory for log files
            level: Log level (DEBUG, INFO, WARNING, ERROR)
            max_file_size: Maximum log file size before rotation
            backup_count: Number of backup files to keep
            enable_syslog: Whether to enable syslog handler
            enable_console: Whether to enable console handler
        """
        self.name = f'svc.{name}'
        self.logger = logging.getLogger(self.name)
        self.logger.propagate = False
        self.formatter = LogfmtFormatter()
        self.setup(
            log_dir=log_dir or DEFAULT_LOG_DIR,
            level=level,
            max_file_size=max_file_size,
            backup_count=backup_count,
            enable_syslog=enable_syslog,
            enable_console=enable_console,
        )

    def setup(
        self,
        log_dir: Path,
        level: str = "INFO",
        max_file_size: int = MAX_LOG_BYTES,
        backup_count: int = BACKUP_COUNT,
        enable_syslog: bool = False,
        enable_console: bool = False
    ) -> None:
        """(Re)build the handler set for this logger."""
        self.log_dir = log_dir
        self.logger.setLevel(getattr(logging, level.upper()))

        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        for handler in build_handlers(
            self.name,
            self.log_dir,
            self.formatter,
            console=enable_console,
            syslog=enable_syslog,
            max_bytes=max_file_size,
            backup_count=backup_count,
        ):
            self.logger.addHandler(handler)

    def _log(self, level: int, msg: str, **kwargs):
        """Log a message with extra context.

        Args:
            level: Log level
            msg: Log message
            **kwargs: Extra context to include in log
        """
        self.logger.log(level, msg, extra=dict(kwargs), stacklevel=3)

    def debug(self, msg: str, **kwargs):
        """Log debug message."""
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs):
        """Log info message."""
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs):
        """Log warning message."""
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs):
        """Log error message."""
        self._log(logging.ERROR, msg, **kwargs)

    def exception(self, msg: str, **kwargs):
        """Log exception with traceback."""
        self.logger.exception(msg, extra=kwargs, stacklevel=2)


_loggers: dict[str, SvcLogger] = {}

_defaults: dict[str, Any] = {
    'log_dir': DEFAULT_LOG_DIR,
    'level': 'INFO',
    'enable_console': False,
    'enable_syslog': False,
}


def get_logger(name: str, **kwargs) -> SvcLogger:
    """Get or create an svc logger.

    Loggers are cached by name; keyword arguments override the defaults set
    by `configure` and only apply when the logger is first created.
    """
    if name not in _loggers:
        options = {**_defaults, **kwargs}
        _loggers[name] = SvcLogger(name, **options)
    return _loggers[name]


def configure(
    log_dir: Path | str | None = None,
    level: str | None = None,
    console: bool | None = None,
    syslog: bool | None = None,
) -> None:
    """Set logging defaults and apply them to loggers already handed out."""
    if log_dir is not None:
        _defaults['log_dir'] = Path(log_dir).expanduser()
    if level is not None:
        _defaults['level'] = level
    if console is not None:
        _defaults['enable_console'] = console
    if syslog is not None:
        _defaults['enable_syslog'] = syslog

    for svc_logger in _loggers.values():
        svc_logger.setup(**_defaults)


def configure_from_config(config: Any) -> None:
    """Configure logging from a loaded config object's `logging` section."""
    log_config = getattr(config, 'logging', None)
    if log_config is None:
        return

    configure(
        log_dir=log_config.log_dir,
        level=log_config.level,
        console=log_config.console,
        syslog=log_config.syslog,
    )
