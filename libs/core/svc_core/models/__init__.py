from svc_core.models.config import LoggingConfig, SvcConfig
from svc_core.models.entry import DEFAULT_INTERPRETER, Entry, EntryKind, ServiceConfig
from svc_core.models.process import KillReport, ProcessHandle, ResolvedCommand, ServiceStatus
from svc_core.models.startup import CommandResult, LaunchAgentConfig

__all__ = [
    "DEFAULT_INTERPRETER",
    "CommandResult",
    "Entry",
    "EntryKind",
    "KillReport",
    "LaunchAgentConfig",
    "LoggingConfig",
    "ProcessHandle",
    "ResolvedCommand",
    "ServiceConfig",
    "ServiceStatus",
    "SvcConfig",
]
