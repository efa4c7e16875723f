from collections.abc import Iterable
from typing import Protocol

from svc_core.models.process import ProcessHandle, ResolvedCommand


class ProcessTable(Protocol):
    def processes(self) -> Iterable[ProcessHandle]:
        ...

    def terminate(self, pid: int) -> None:
        ...


class ProcessLauncher(Protocol):
    def spawn_detached(self, command: ResolvedCommand) -> int:
        ...
