"""Windows login-time registration through the per-user Run key."""

import subprocess
from collections.abc import Sequence

from svc_logging import get_logger

from svc_core.errors import RegistrationError
from svc_core.models.startup import CommandResult
from svc_core.process_manager.system_command import run_command

RUN_KEY = r"HKCU\Software\Microsoft\Windows\CurrentVersion\Run"


def build_run_command(program: str, arguments: Sequence[str], working_directory: str) -> str:
    """Command line stored in the Run key.

    The Run key has no working-directory field, so the program is started
    through `cmd.exe /c start` with `/d` set to the working directory.
    """
    argv = [program, *arguments]
    if not working_directory:
        return subprocess.list2cmdline(argv)
    return (
        f'cmd.exe /d /c start "" /d "{working_directory}" '
        f"{subprocess.list2cmdline(argv)}"
    )


class RegistryRunKeyManager:
    """Registers entries as values under HKCU\\...\\CurrentVersion\\Run.

    Values are written with `reg add /f`, which replaces an existing value in
    one call, so a registration is either fully present or absent.
    """

    def __init__(self, key: str = RUN_KEY):
        self.key = key
        self._logger = get_logger("registry")

    def register(
        self,
        name: str,
        program: str,
        arguments: Sequence[str],
        working_directory: str,
    ) -> None:
        command_line = build_run_command(program, arguments, working_directory)
        result = self._run_reg(
            "add", self.key, "/v", name, "/t", "REG_SZ", "/d", command_line, "/f"
        )
        if not result.success:
            raise RegistrationError(
                f"Failed to register {name} under {self.key}: {result.message}"
            )
        self._logger.info("Run key value written", value=name, command=command_line)

    def unregister(self, name: str) -> None:
        if not self.is_registered(name):
            return

        result = self._run_reg("delete", self.key, "/v", name, "/f")
        if not result.success:
            raise RegistrationError(
                f"Failed to remove {name} from {self.key}: {result.message}"
            )
        self._logger.info("Run key value removed", value=name)

    def is_registered(self, name: str) -> bool:
        return self._run_reg("query", self.key, "/v", name).success

    def _run_reg(self, *args: str) -> CommandResult:
        return run_command("reg", *args)
