from dataclasses import dataclass, field


@dataclass
class LaunchAgentConfig:
    """Configuration for a macOS launch agent.

    Attributes:
        label: Unique identifier for the launch agent (e.g., 'com.svc.mytool')
        program_path: Path to the executable or interpreter
        program_arguments: Additional arguments for the program
        working_directory: Working directory for the process
        run_at_load: Whether to start when the agent is loaded at login
        keep_alive: Whether launchd restarts the process if it exits
    """

    label: str
    program_path: str
    program_arguments: list[str] = field(default_factory=list)
    working_directory: str | None = None
    run_at_load: bool = True
    keep_alive: bool = False


@dataclass
class CommandResult:
    """Result from running an OS helper command (launchctl, reg).

    Attributes:
        success: Whether the command succeeded
        message: Human-readable message about the result
        exit_code: Exit code from the command
        stderr: Any error output
    """

    success: bool
    message: str
    exit_code: int = 0
    stderr: str = ""
