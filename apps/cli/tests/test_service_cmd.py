"""Tests for the svc command line."""

import textwrap

import pytest
from typer.testing import CliRunner

from svc_cli.commands import service_cmd
from svc_cli.main import app
from svc_core import ServiceActions, __version__

runner = CliRunner()

CONFIG = """
- name: MyTool
  type: Executable
  path: C:\\bin\\tool.exe
- name: js
  type: Util
  path: D:\\scripts\\x.js
  interpreter: nodejs
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "services.yaml"
    path.write_text(textwrap.dedent(CONFIG), encoding="utf-8")
    return path


@pytest.fixture
def actions(monkeypatch, process_table, registrar):
    actions = ServiceActions(process_table=process_table, launcher=process_table, registrar=registrar)
    monkeypatch.setattr(service_cmd, "_build_actions", lambda: actions)
    monkeypatch.setattr(service_cmd, "configure_from_config", lambda config: None)
    return actions


def svc(config_file, *args):
    return runner.invoke(app, ["--config", str(config_file), *args])


class TestCli:
    """Tests for the svc CLI commands."""

    def test_version(self):
        """Test --version prints the version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_enable(self, config_file, actions, registrar):
        """Test enable registers the entry."""
        result = svc(config_file, "enable", "MyTool")

        assert result.exit_code == 0
        assert "enabled" in result.output
        assert "MyTool" in registrar.registrations

    def test_disable_never_enabled(self, config_file, actions, registrar):
        """Test disable succeeds even without a registration."""
        result = svc(config_file, "disable", "MyTool")

        assert result.exit_code == 0
        assert "disabled" in result.output

    def test_enable_failure_exit_code(self, config_file, actions, registrar):
        """Test registration failures exit non-zero."""
        registrar.fail_with = "Access is denied"

        result = svc(config_file, "enable", "MyTool")

        assert result.exit_code == 1
        assert "Access is denied" in result.output

    def test_unknown_service(self, config_file, actions):
        """Test unknown names exit non-zero."""
        result = svc(config_file, "status", "Nope")

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_missing_config(self, tmp_path, actions):
        """Test a missing configuration exits non-zero."""
        result = svc(tmp_path / "missing.yaml", "status", "MyTool")

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_run(self, config_file, actions, process_table):
        """Test run launches from the executable's directory."""
        result = svc(config_file, "run", "MyTool")

        assert result.exit_code == 0
        assert "started in the background" in result.output
        assert process_table.spawned[0][1].working_directory == "C:\\bin"

    def test_run_at(self, config_file, actions, process_table):
        """Test 'run NAME at DIR' overrides the working directory."""
        result = svc(config_file, "run", "MyTool", "at", "D:\\data")

        assert result.exit_code == 0
        assert process_table.spawned[0][1].working_directory == "D:\\data"

    def test_run_at_option(self, config_file, actions, process_table):
        """Test --at overrides the working directory."""
        result = svc(config_file, "run", "js", "--at", "/tmp/work")

        assert result.exit_code == 0
        command = process_table.spawned[0][1]
        assert command.argv == ["node", "D:\\scripts\\x.js"]
        assert command.working_directory == "/tmp/work"

    def test_run_bad_keyword(self, config_file, actions, process_table):
        """Test anything but 'at' after the name is rejected."""
        result = svc(config_file, "run", "MyTool", "in", "D:\\data")

        assert result.exit_code == 1
        assert process_table.spawned == []

    def test_run_launch_failure(self, config_file, actions, process_table):
        """Test launch failures exit non-zero."""
        process_table.spawn_error = FileNotFoundError(2, "No such file or directory")

        result = svc(config_file, "run", "MyTool")

        assert result.exit_code == 1
        assert "Failed to start MyTool" in result.output

    def test_kill_nothing_running(self, config_file, actions):
        """Test kill with nothing to kill exits non-zero."""
        result = svc(config_file, "kill", "MyTool")

        assert result.exit_code == 1
        assert "not running" in result.output

    def test_scenario(self, config_file, actions, process_table):
        """Test run, run at, status and kill end to end."""
        assert svc(config_file, "run", "MyTool").exit_code == 0
        result = svc(config_file, "status", "MyTool")
        assert "running (1)" in result.output

        assert svc(config_file, "run", "MyTool", "at", "D:\\data").exit_code == 0
        result = svc(config_file, "status", "MyTool")
        assert "running (2)" in result.output

        result = svc(config_file, "kill", "MyTool")
        assert result.exit_code == 0
        assert result.output.count("killed") == 2

        result = svc(config_file, "status", "MyTool")
        assert result.exit_code == 0
        assert "stopped" in result.output

    def test_status_util_shows_interpreter(self, config_file, actions, registrar):
        """Test status shows the interpreter and start-up state of a util."""
        registrar.registrations["js"] = ("node", ("x.js",), "D:\\scripts")

        result = svc(config_file, "status", "js")

        assert result.exit_code == 0
        assert "Interpreter" in result.output
        assert "nodejs" in result.output
        assert "enabled" in result.output

    def test_list(self, config_file, actions):
        """Test list shows every configured entry."""
        result = svc(config_file, "list")

        assert result.exit_code == 0
        assert "MyTool" in result.output
        assert "Utility" in result.output
