"""Root conftest.py for svc tests.

Provides in-memory stand-ins for the OS process table and the startup
registry, shared by libs/core/tests and apps/cli/tests, and keeps log files
inside each test's temporary directory.
"""

from collections.abc import Sequence

import pytest

import svc_logging
from svc_core.errors import RegistrationError
from svc_core.models.process import ProcessHandle, ResolvedCommand


class FakeProcessTable:
    """Process table and launcher backed by a dict of live handles."""

    def __init__(self, handles: Sequence[ProcessHandle] = ()):
        self.handles: dict[int, ProcessHandle] = {h.pid: h for h in handles}
        self.terminate_errors: dict[int, OSError] = {}
        self.spawn_error: OSError | None = None
        self.spawned: list[tuple[int, ResolvedCommand]] = []
        self.terminated: list[int] = []
        self.enumerations = 0
        self._next_pid = 1000

    def add(self, pid: int, executable_path: str, *arguments: str) -> ProcessHandle:
        handle = ProcessHandle(pid, executable_path, (executable_path, *arguments))
        self.handles[pid] = handle
        return handle

    def processes(self):
        self.enumerations += 1
        return list(self.handles.values())

    def terminate(self, pid: int) -> None:
        if pid in self.terminate_errors:
            raise self.terminate_errors[pid]
        if pid not in self.handles:
            raise ProcessLookupError(f"Process {pid} does not exist")
        del self.handles[pid]
        self.terminated.append(pid)

    def spawn_detached(self, command: ResolvedCommand) -> int:
        if self.spawn_error is not None:
            raise self.spawn_error
        pid = self._next_pid
        self._next_pid += 1
        self.spawned.append((pid, command))
        self.handles[pid] = ProcessHandle(pid, command.program, tuple(command.argv))
        return pid


class FakeRegistrar:
    """Startup registry keyed by entry name."""

    def __init__(self):
        self.registrations: dict[str, tuple[str, tuple[str, ...], str]] = {}
        self.fail_with: str | None = None

    def register(self, name: str, program: str, arguments: Sequence[str], working_directory: str) -> None:
        if self.fail_with:
            raise RegistrationError(self.fail_with)
        self.registrations[name] = (program, tuple(arguments), working_directory)

    def unregister(self, name: str) -> None:
        if self.fail_with:
            raise RegistrationError(self.fail_with)
        self.registrations.pop(name, None)

    def is_registered(self, name: str) -> bool:
        if self.fail_with:
            raise RegistrationError(self.fail_with)
        return name in self.registrations


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path_factory):
    """Send every svc log file into a per-test temporary directory."""
    log_dir = tmp_path_factory.mktemp("logs")
    svc_logging.configure(log_dir=log_dir, level="DEBUG", console=False, syslog=False)
    return log_dir


@pytest.fixture
def process_table():
    return FakeProcessTable()


@pytest.fixture
def registrar():
    return FakeRegistrar()
