"""macOS login-time registration through per-user launch agents."""

import os
import shutil
import sys
from collections.abc import Sequence
from pathlib import Path

from svc_logging import get_logger

from svc_core.errors import RegistrationError
from svc_core.models.startup import CommandResult, LaunchAgentConfig
from svc_core.process_manager.plist_generator import PlistGenerator
from svc_core.process_manager.system_command import run_command


class LaunchctlManager:
    """Registers entries as macOS launch agents.

    A registration is a plist in ~/Library/LaunchAgents with RunAtLoad set,
    which launchd loads at the next login. Registering does not load the
    agent now, so enabling never starts the program. The launchctl override
    database is updated so an earlier `disable` does not keep the agent
    from loading.
    """

    def __init__(self, agents_dir: Path | None = None):
        """Initialize the launchctl manager.

        Args:
            agents_dir: Directory for plist files (default ~/Library/LaunchAgents)
        """
        self.agents_dir = agents_dir or PlistGenerator.get_launch_agents_dir()
        self._logger = get_logger("launchctl")

    def is_macos(self) -> bool:
        """Check if running on macOS.

        Returns:
            True if running on macOS
        """
        return sys.platform == "darwin"

    def plist_path(self, name: str) -> Path:
        return PlistGenerator.get_plist_path(PlistGenerator.label_for(name), self.agents_dir)

    def register(
        self,
        name: str,
        program: str,
        arguments: Sequence[str],
        working_directory: str,
    ) -> None:
        """Write the launch agent for `name`, replacing any previous one.

        Raises:
            RegistrationError: If the plist cannot be written or launchctl
                refuses to enable the label. Nothing is left behind.
        """
        label = PlistGenerator.label_for(name)
        path = self.plist_path(name)
        previous = path.read_bytes() if path.exists() else None

        config = LaunchAgentConfig(
            label=label,
            program_path=self._launchd_program(program),
            program_arguments=list(arguments),
            working_directory=working_directory or None,
            run_at_load=True,
            keep_alive=False,
        )

        try:
            PlistGenerator.write_plist(config, path)
        except OSError as e:
            raise RegistrationError(f"Failed to write {path}: {e}") from e

        if self.is_macos():
            result = self._run_launchctl("enable", self._service_target(label))
            if not result.success:
                self._restore(path, previous)
                raise RegistrationError(
                    f"launchctl could not enable {label}: {result.message}"
                )

        self._logger.info("Launch agent written", label=label, plist=str(path))

    def unregister(self, name: str) -> None:
        """Remove the launch agent for `name`; a missing agent is not an error.

        Raises:
            RegistrationError: If the plist exists but cannot be removed
        """
        label = PlistGenerator.label_for(name)
        path = self.plist_path(name)
        if not path.exists():
            return

        try:
            path.unlink()
        except OSError as e:
            raise RegistrationError(f"Failed to remove {path}: {e}") from e

        if self.is_macos():
            result = self._run_launchctl("disable", self._service_target(label))
            if not result.success:
                self._logger.warning(
                    "launchctl disable failed", label=label, error=result.message
                )

        self._logger.info("Launch agent removed", label=label, plist=str(path))

    def is_registered(self, name: str) -> bool:
        return self.plist_path(name).exists()

    def _restore(self, path: Path, previous: bytes | None) -> None:
        try:
            if previous is None:
                path.unlink(missing_ok=True)
            else:
                path.write_bytes(previous)
        except OSError as e:
            self._logger.error("Failed to roll back launch agent", plist=str(path), error=str(e))

    def _launchd_program(self, program: str) -> str:
        """Pin a bare program name to the binary found on the current PATH.

        launchd searches its own minimal PATH at login, not the user's shell
        PATH, so `python3` or `node` would otherwise fail to start.
        """
        if os.path.dirname(program):
            return program

        found = shutil.which(program)
        if found is None:
            self._logger.warning("Program not found on PATH", program=program)
            return program
        return found

    def _service_target(self, label: str) -> str:
        return f"gui/{self._get_uid()}/{label}"

    def _run_launchctl(self, *args: str) -> CommandResult:
        return run_command("launchctl", *args)

    @staticmethod
    def _get_uid() -> int:
        return os.getuid()
