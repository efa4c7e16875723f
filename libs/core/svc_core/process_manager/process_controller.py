"""Platform-agnostic access to the OS process table."""

import os
import subprocess
import sys
from collections.abc import Iterator

import psutil

from svc_core.models.process import ProcessHandle, ResolvedCommand

# Win32 process creation flags; only defined by subprocess on Windows.
DETACHED_PROCESS = getattr(subprocess, "DETACHED_PROCESS", 0x00000008)
CREATE_NEW_PROCESS_GROUP = getattr(subprocess, "CREATE_NEW_PROCESS_GROUP", 0x00000200)


class ProcessController:
    """Enumerate, terminate and spawn OS processes.

    This is the only place svc touches the live process table. It is
    re-queried on every call; nothing is cached between operations.
    """

    def is_windows(self) -> bool:
        """Check if running on Windows.

        Returns:
            True if running on Windows
        """
        return sys.platform == "win32"

    def processes(self) -> Iterator[ProcessHandle]:
        """Yield every process whose executable path can be read.

        Processes that exit during enumeration, or whose image path the
        current user may not read, are skipped. The calling process is never
        reported, so svc cannot match or terminate itself.
        """
        own_pid = os.getpid()
        for proc in psutil.process_iter(["pid", "exe", "cmdline"]):
            try:
                info = proc.info
            except (psutil.NoSuchProcess, psutil.AccessDenied):
                continue

            exe = info.get("exe")
            if not exe or info["pid"] == own_pid:
                continue

            yield ProcessHandle(
                pid=info["pid"],
                executable_path=exe,
                command_line=tuple(info.get("cmdline") or ()),
            )

    def terminate(self, pid: int) -> None:
        """Request termination of a process without waiting for it to exit.

        Args:
            pid: Process to terminate

        Raises:
            ProcessLookupError: If the process no longer exists
            PermissionError: If the current user may not terminate it
        """
        try:
            psutil.Process(pid).terminate()
        except psutil.NoSuchProcess:
            raise ProcessLookupError(f"Process {pid} does not exist") from None
        except psutil.AccessDenied:
            raise PermissionError(f"Permission denied to terminate process {pid}") from None

    def spawn_detached(self, command: ResolvedCommand) -> int:
        """Start a command that outlives the calling process.

        The child runs in its own session (POSIX) or detached from the
        console with its own process group (Windows), with stdio pointed at
        the null device. The caller does not wait on it.

        Args:
            command: Resolved command to start

        Returns:
            PID of the new process

        Raises:
            OSError: If the process could not be created
        """
        kwargs: dict = {
            "cwd": command.working_directory or None,
            "stdin": subprocess.DEVNULL,
            "stdout": subprocess.DEVNULL,
            "stderr": subprocess.DEVNULL,
            "close_fds": True,
            "env": os.environ.copy(),
        }

        if self.is_windows():
            kwargs["creationflags"] = DETACHED_PROCESS | CREATE_NEW_PROCESS_GROUP
        else:
            kwargs["start_new_session"] = True

        process = subprocess.Popen(command.argv, **kwargs)
        return process.pid
