"""Unit tests for the command resolver."""

from unittest.mock import patch

import pytest

from svc_core.models.entry import Entry, EntryKind
from svc_core.models.process import ResolvedCommand
from svc_core.process_manager.command_resolver import (
    interpreter_binary_for,
    parent_directory,
    resolve,
)


def executable(path: str, work_at: str | None = None) -> Entry:
    return Entry(name="tool", kind=EntryKind.EXECUTABLE, path=path, working_directory=work_at)


def util(path: str, interpreter: str | None = None, work_at: str | None = None) -> Entry:
    return Entry(
        name="util",
        kind=EntryKind.UTIL,
        path=path,
        interpreter=interpreter,
        working_directory=work_at,
    )


class TestInterpreterBinaryFor:
    """Tests for interpreter_binary_for."""

    @pytest.mark.parametrize(
        ("name", "binary"),
        [("python", "python"), ("nodejs", "node"), ("NodeJS", "node"), ("pwsh", "pwsh")],
    )
    def test_known(self, name, binary):
        """Test known interpreter names map to their executables."""
        assert interpreter_binary_for(name) == binary

    def test_unknown_passes_through(self):
        """Test unknown names are used verbatim."""
        assert interpreter_binary_for(r"C:\Tools\MyInterp.exe") == r"C:\Tools\MyInterp.exe"

    def test_default(self):
        """Test None means python."""
        assert interpreter_binary_for(None) == "python"


class TestParentDirectory:
    """Tests for parent_directory."""

    @pytest.mark.parametrize(
        ("path", "parent"),
        [
            (r"C:\bin\tool.exe", r"C:\bin"),
            ("C:/bin/tool.exe", r"C:\bin"),
            (r"C:\tool.exe", "C:\\"),
            ("/usr/local/bin/tool", "/usr/local/bin"),
            ("tool", "."),
        ],
    )
    def test_parent(self, path, parent):
        """Test parents are computed for both path styles on any host."""
        assert parent_directory(path) == parent


class TestResolve:
    """Tests for resolve."""

    def test_executable(self):
        """Test an executable runs itself with no arguments."""
        command = resolve(executable(r"C:\bin\tool.exe"))

        assert command == ResolvedCommand(
            program=r"C:\bin\tool.exe",
            arguments=(),
            working_directory=r"C:\bin",
        )
        assert command.argv == [r"C:\bin\tool.exe"]

    def test_util_with_nodejs(self):
        """Test a nodejs util runs node with the script as only argument."""
        command = resolve(util(r"D:\scripts\x.js", interpreter="nodejs"))

        assert command.program == "node"
        assert command.arguments == (r"D:\scripts\x.js",)
        assert command.working_directory == r"D:\scripts"

    def test_util_default_interpreter(self):
        """Test a util without interpreter runs under python."""
        command = resolve(util("/opt/jobs/sync.py"))

        assert command.argv == ["python", "/opt/jobs/sync.py"]

    def test_override_beats_entry_working_directory(self):
        """Test the run-time override always wins."""
        entry = executable(r"C:\bin\tool.exe", work_at=r"E:\configured")

        assert resolve(entry, r"D:\data").working_directory == r"D:\data"

    def test_entry_working_directory_beats_parent(self):
        """Test a configured working directory beats the derived default."""
        entry = util(r"D:\scripts\x.js", work_at=r"E:\configured")

        assert resolve(entry).working_directory == r"E:\configured"
        assert resolve(entry, None).working_directory == r"E:\configured"

    def test_deterministic(self):
        """Test identical inputs give identical commands."""
        entry = util(r"D:\scripts\x.js", interpreter="nodejs")

        assert resolve(entry, r"D:\data") == resolve(entry, r"D:\data")

    def test_pure(self):
        """Test resolve touches neither filesystem nor process table."""
        entry = executable("/no/such/dir/tool")

        with (
            patch("os.stat") as mock_stat,
            patch("psutil.process_iter") as mock_iter,
            patch("subprocess.Popen") as mock_popen,
        ):
            command = resolve(entry)

        assert command.working_directory == "/no/such/dir"
        mock_stat.assert_not_called()
        mock_iter.assert_not_called()
        mock_popen.assert_not_called()
