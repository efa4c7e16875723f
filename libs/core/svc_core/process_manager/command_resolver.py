"""Turn configured entries into concrete, launchable commands."""

import re
from pathlib import PurePath, PurePosixPath, PureWindowsPath

from svc_core.models.entry import DEFAULT_INTERPRETER, Entry, EntryKind
from svc_core.models.process import ResolvedCommand

# Interpreter names accepted in the configuration, mapped to the executable
# that gets spawned. Names not listed here are used as the executable as-is.
INTERPRETERS: dict[str, str] = {
    "python": "python",
    "python3": "python3",
    "pythonw": "pythonw",
    "py": "py",
    "nodejs": "node",
    "node": "node",
    "deno": "deno",
    "bun": "bun",
    "powershell": "powershell",
    "pwsh": "pwsh",
    "bash": "bash",
    "sh": "sh",
    "ruby": "ruby",
    "perl": "perl",
    "lua": "lua",
}

_DRIVE = re.compile(r"^[A-Za-z]:")


def interpreter_binary_for(interpreter: str | None) -> str:
    """Map an interpreter name to the executable to spawn.

    Args:
        interpreter: Interpreter name from the configuration

    Returns:
        Executable name for known interpreters, the input otherwise
    """
    name = interpreter or DEFAULT_INTERPRETER
    return INTERPRETERS.get(name.lower(), name)


def _pure_path(path: str) -> PurePath:
    # Configured paths may come from another OS than the one running svc.
    if _DRIVE.match(path) or "\\" in path:
        return PureWindowsPath(path)
    return PurePosixPath(path)


def parent_directory(path: str) -> str:
    """Directory containing `path`, computed without touching the filesystem."""
    return str(_pure_path(path).parent)


def resolve(entry: Entry, working_dir_override: str | None = None) -> ResolvedCommand:
    """Resolve an entry into the command that `run`, `kill` and `status` act on.

    Args:
        entry: Configured entry
        working_dir_override: Working directory given at run time

    Returns:
        ResolvedCommand for the entry
    """
    if entry.kind is EntryKind.UTIL:
        program = interpreter_binary_for(entry.interpreter)
        arguments: tuple[str, ...] = (entry.path,)
    else:
        program = entry.path
        arguments = ()

    if working_dir_override:
        working_directory = working_dir_override
    elif entry.working_directory:
        working_directory = entry.working_directory
    else:
        working_directory = parent_directory(entry.path)

    return ResolvedCommand(
        program=program,
        arguments=arguments,
        working_directory=working_directory,
    )
