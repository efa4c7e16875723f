from dataclasses import dataclass, field


@dataclass(frozen=True)
class ResolvedCommand:
    """Concrete invocation computed from an entry.

    Attributes:
        program: Executable to spawn (the interpreter for utils)
        arguments: Arguments passed after the program
        working_directory: Directory the process starts in
    """

    program: str
    arguments: tuple[str, ...] = ()
    working_directory: str = ""

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.arguments]


@dataclass(frozen=True)
class ProcessHandle:
    """A live OS process seen during one enumeration."""

    pid: int
    executable_path: str
    command_line: tuple[str, ...] = ()


@dataclass
class KillReport:
    """Outcome of terminating every process that matched an entry.

    Attributes:
        matched: Number of processes that matched the executable path
        terminated: PIDs that accepted the termination request
        failures: (pid, reason) pairs for requests that failed
    """

    matched: int = 0
    terminated: list[int] = field(default_factory=list)
    failures: list[tuple[int, str]] = field(default_factory=list)

    @property
    def terminated_count(self) -> int:
        return len(self.terminated)

    @property
    def failed_count(self) -> int:
        return len(self.failures)


@dataclass
class ServiceStatus:
    """Observed state of one entry.

    Attributes:
        name: Entry name
        pids: PIDs of processes matching the entry's executable
        enabled: Whether a startup registration exists, None if unknown
    """

    name: str
    pids: list[int] = field(default_factory=list)
    enabled: bool | None = None

    @property
    def running(self) -> bool:
        return bool(self.pids)

    @property
    def count(self) -> int:
        return len(self.pids)

    @property
    def state(self) -> str:
        return "running" if self.running else "stopped"
