from svc_core.interfaces.process_table import ProcessLauncher, ProcessTable
from svc_core.interfaces.startup_registrar import StartupRegistrar

__all__ = [
    "ProcessLauncher",
    "ProcessTable",
    "StartupRegistrar",
]
