"""Service lifecycle actions: enable, disable, run, kill and status."""

from svc_logging import get_logger

from svc_core.errors import KillError, LaunchError, RegistrationError
from svc_core.interfaces import ProcessLauncher, ProcessTable, StartupRegistrar
from svc_core.models.entry import Entry
from svc_core.models.process import KillReport, ServiceStatus
from svc_core.process_manager.command_resolver import resolve
from svc_core.process_manager.process_matcher import ProcessMatcher


class ServiceActions:
    """Encapsulates the lifecycle of configured entries.

    Holds no state of its own: the process table and the startup registry
    are read fresh on every call. Enabling and running are independent, so
    `enable` never starts a process and `run` never registers one.
    """

    def __init__(
        self,
        process_table: ProcessTable,
        launcher: ProcessLauncher,
        registrar: StartupRegistrar,
    ):
        """Initialize service actions.

        Args:
            process_table: Source of live processes and termination
            launcher: Spawns detached processes
            registrar: Login-time registration backend
        """
        self.process_table = process_table
        self.launcher = launcher
        self.registrar = registrar
        self.matcher = ProcessMatcher(process_table)
        self._logger = get_logger("lifecycle")

    def enable(self, entry: Entry) -> None:
        """Register the entry to start at login, replacing any earlier registration.

        Raises:
            RegistrationError: If the OS registration call fails
        """
        command = resolve(entry)
        self.registrar.register(
            entry.name,
            command.program,
            command.arguments,
            command.working_directory,
        )
        self._logger.info(
            "Service enabled",
            service=entry.name,
            program=command.program,
            cwd=command.working_directory,
        )

    def disable(self, entry: Entry) -> None:
        """Remove the entry's login registration; a no-op if there is none."""
        self.registrar.unregister(entry.name)
        self._logger.info("Service disabled", service=entry.name)

    def run(self, entry: Entry, working_dir_override: str | None = None) -> int:
        """Start the entry as a detached process and return its PID.

        Args:
            entry: Entry to start
            working_dir_override: Working directory for this launch only

        Raises:
            LaunchError: If the process could not be created
        """
        command = resolve(entry, working_dir_override)
        try:
            pid = self.launcher.spawn_detached(command)
        except OSError as e:
            self._logger.error(
                "Launch failed",
                service=entry.name,
                program=command.program,
                cwd=command.working_directory,
                error=str(e),
            )
            raise LaunchError(
                f"Failed to start {entry.name} ({command.program} in "
                f"{command.working_directory}): {e.strerror or e}"
            ) from e

        self._logger.info(
            "Service started",
            service=entry.name,
            pid=pid,
            program=command.program,
            cwd=command.working_directory,
        )
        return pid

    def kill(self, entry: Entry) -> KillReport:
        """Terminate every process matching the entry's executable.

        Each termination is independent; a failure is recorded in the report
        and the remaining processes are still terminated.

        Raises:
            KillError: If no process matched
        """
        command = resolve(entry)
        handles = self.matcher.find_for_command(command)

        report = KillReport(matched=len(handles))
        if not handles:
            raise KillError(f"Service {entry.name} is not running.", report)

        for handle in handles:
            try:
                self.process_table.terminate(handle.pid)
            except OSError as e:
                report.failures.append((handle.pid, str(e)))
                self._logger.warning(
                    "Termination failed", service=entry.name, pid=handle.pid, error=str(e)
                )
            else:
                report.terminated.append(handle.pid)
                self._logger.info("Process terminated", service=entry.name, pid=handle.pid)

        return report

    def status(self, entry: Entry) -> ServiceStatus:
        """Report matching processes and whether a login registration exists."""
        command = resolve(entry)
        handles = self.matcher.find_for_command(command)

        try:
            enabled: bool | None = self.registrar.is_registered(entry.name)
        except RegistrationError as e:
            self._logger.debug("Registration state unknown", service=entry.name, error=str(e))
            enabled = None

        return ServiceStatus(
            name=entry.name,
            pids=sorted(h.pid for h in handles),
            enabled=enabled,
        )
