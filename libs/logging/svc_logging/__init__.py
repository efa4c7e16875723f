"""svc centralized logging with logfmt format."""

from svc_logging.logger import SvcLogger, configure, configure_from_config, get_logger
from svc_logging.formatters import LogfmtFormatter
from svc_logging.handlers import build_handlers, find_syslog_socket

__all__ = [
    "SvcLogger",
    "get_logger",
    "configure",
    "configure_from_config",
    "LogfmtFormatter",
    "build_handlers",
    "find_syslog_socket",
]
