"""Run OS helper commands (launchctl, reg) and capture their outcome."""

import subprocess

from svc_core.models.startup import CommandResult


def run_command(*args: str) -> CommandResult:
    """Run a helper command to completion.

    Args:
        *args: Program followed by its arguments

    Returns:
        CommandResult with command output
    """
    try:
        result = subprocess.run(
            list(args),
            capture_output=True,
            text=True,
            check=False,
        )

        success = result.returncode == 0
        message = result.stdout if success else result.stderr or result.stdout

        return CommandResult(
            success=success,
            message=message.strip(),
            exit_code=result.returncode,
            stderr=result.stderr.strip(),
        )
    except FileNotFoundError:
        return CommandResult(
            success=False,
            message=f"{args[0]} command not found",
            exit_code=127,
        )
    except (OSError, subprocess.SubprocessError) as e:
        return CommandResult(
            success=False,
            message=f"Command failed: {e}",
            exit_code=1,
            stderr=str(e),
        )
