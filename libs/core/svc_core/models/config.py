from dataclasses import dataclass, field
from pathlib import Path

from svc_core.models.entry import ServiceConfig


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_dir: str = str(Path.home() / ".svc" / "logs")
    console: bool = False
    syslog: bool = False


@dataclass
class SvcConfig:
    """Loaded configuration: the entries plus ambient settings."""
    services: ServiceConfig = field(default_factory=ServiceConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    source: Path | None = None
