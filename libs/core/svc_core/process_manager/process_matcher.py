"""Associate live processes with an entry by executable path."""

import posixpath

from svc_core.interfaces import ProcessTable
from svc_core.models.process import ProcessHandle, ResolvedCommand


def normalize_path(path: str) -> str:
    """Normalize a path for comparison.

    Separators are unified to '/', redundant separators and '.' segments are
    collapsed and the result is case-folded, so `D:\\Tools\\App.EXE` and
    `d:/tools/./app.exe` compare equal.
    """
    unified = path.strip().replace("\\", "/")
    if not unified:
        return ""
    return posixpath.normpath(unified).casefold()


def _image_name(normalized: str) -> str:
    name = posixpath.basename(normalized)
    return name[:-4] if name.endswith(".exe") else name


def paths_match(process_path: str, query_path: str) -> bool:
    """Whether a process image path refers to the queried executable.

    A query without a directory component (a bare interpreter name such as
    `node`) is compared against the image file name, ignoring `.exe`.
    """
    process_norm = normalize_path(process_path)
    query_norm = normalize_path(query_path)
    if not process_norm or not query_norm:
        return False

    if "/" not in query_norm:
        return _image_name(process_norm) == _image_name(query_norm)
    return process_norm == query_norm


class ProcessMatcher:
    """Find running processes whose executable matches a path.

    Matching is by path only. Every process sharing the executable is
    matched, including copies started outside svc.
    """

    def __init__(self, process_table: ProcessTable):
        self.process_table = process_table

    def find_matching(
        self,
        executable_path: str,
        arguments: tuple[str, ...] = (),
    ) -> list[ProcessHandle]:
        """Enumerate processes once and return those matching the path.

        Args:
            executable_path: Executable to look for
            arguments: Leading arguments that must also appear in the
                process command line (the script path of a util)

        Returns:
            Matching processes, possibly empty
        """
        matches = []
        for handle in self.process_table.processes():
            if not self._is_image_of(handle, executable_path):
                continue
            if arguments and not self._has_arguments(handle, arguments):
                continue
            matches.append(handle)
        return matches

    def find_for_command(self, command: ResolvedCommand) -> list[ProcessHandle]:
        return self.find_matching(command.program, command.arguments)

    @staticmethod
    def _is_image_of(handle: ProcessHandle, executable_path: str) -> bool:
        if paths_match(handle.executable_path, executable_path):
            return True
        # The OS reports the image with symlinks resolved (python3 -> python3.11),
        # so a bare interpreter name is also checked against argv[0].
        if "/" in normalize_path(executable_path) or not handle.command_line:
            return False
        return paths_match(handle.command_line[0], executable_path)

    @staticmethod
    def _has_arguments(handle: ProcessHandle, arguments: tuple[str, ...]) -> bool:
        wanted = [normalize_path(arg) for arg in arguments]
        # Skip argv[0]; the image path was already compared.
        seen = [normalize_path(arg) for arg in handle.command_line[1:]]
        return all(arg in seen for arg in wanted)
