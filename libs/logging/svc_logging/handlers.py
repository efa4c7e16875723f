"""Log handlers for svc."""

import logging
import logging.handlers
import sys
from pathlib import Path

MAX_LOG_BYTES = 1024 * 1024
BACKUP_COUNT = 3
SYSLOG_SOCKETS = ('/dev/log', '/var/run/syslog')


def log_file_for(log_dir: Path, logger_name: str) -> Path:
    return log_dir / f'{logger_name}.log'


def find_syslog_socket(candidates: tuple[str, ...] = SYSLOG_SOCKETS) -> str | None:
    """Return the first local syslog socket that exists, or None."""
    if sys.platform == 'win32':
        return None
    return next((path for path in candidates if Path(path).exists()), None)


def file_handler(
    log_file: Path,
    formatter: logging.Formatter,
    max_bytes: int = MAX_LOG_BYTES,
    backup_count: int = BACKUP_COUNT,
) -> logging.Handler:
    """Create a rotating file handler.

    The file is opened on the first record, so loggers that never write
    leave no empty file behind; the directory is created up front.

    Args:
        log_file: Path to log file
        formatter: Log formatter to use
        max_bytes: Maximum file size before rotation
        backup_count: Number of rotated files to keep

    Returns:
        Configured file handler
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8',
        delay=True,
    )
    handler.setFormatter(formatter)
    return handler


def syslog_handler(formatter: logging.Formatter) -> logging.Handler | None:
    """Create a handler for the local syslog socket, if there is one."""
    socket_path = find_syslog_socket()
    if socket_path is None:
        return None

    try:
        handler = logging.handlers.SysLogHandler(address=socket_path)
    except OSError:
        return None
    handler.setFormatter(formatter)
    return handler


def build_handlers(
    logger_name: str,
    log_dir: Path,
    formatter: logging.Formatter,
    console: bool = False,
    syslog: bool = False,
    max_bytes: int = MAX_LOG_BYTES,
    backup_count: int = BACKUP_COUNT,
) -> list[logging.Handler]:
    """Build the handler set for one svc logger.

    A log file is always written; stderr and syslog are optional. Console
    output goes to stderr so it never mixes with the CLI's own output.
    """
    handlers = [
        file_handler(log_file_for(log_dir, logger_name), formatter, max_bytes, backup_count)
    ]

    if console:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        handlers.append(stream_handler)

    if syslog:
        handler = syslog_handler(formatter)
        if handler is not None:
            handlers.append(handler)

    return handlers
