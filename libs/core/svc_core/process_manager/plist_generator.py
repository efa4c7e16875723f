"""Plist generator for macOS launch agent configuration."""

import os
import plistlib
import re
import tempfile
from pathlib import Path
from typing import Any

from svc_core.models.startup import LaunchAgentConfig

LABEL_PREFIX = "com.svc"

_UNSAFE_LABEL_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


class PlistGenerator:
    """Generates macOS plist files for launch agent configuration."""

    @staticmethod
    def label_for(name: str) -> str:
        """Launch agent label for an entry name (e.g. 'com.svc.MyTool')."""
        return f"{LABEL_PREFIX}.{_UNSAFE_LABEL_CHARS.sub('-', name)}"

    @staticmethod
    def generate_plist(config: LaunchAgentConfig) -> dict[str, Any]:
        """Generate a plist dictionary from configuration.

        Args:
            config: Launch agent configuration

        Returns:
            Dictionary suitable for plistlib serialization
        """
        plist_dict: dict[str, Any] = {
            "Label": config.label,
            "ProgramArguments": [config.program_path, *config.program_arguments],
            "RunAtLoad": config.run_at_load,
            "KeepAlive": config.keep_alive,
        }

        if config.working_directory:
            plist_dict["WorkingDirectory"] = config.working_directory

        return plist_dict

    @staticmethod
    def write_plist(config: LaunchAgentConfig, output_path: Path) -> None:
        """Write a plist file, replacing any previous one in a single step.

        Args:
            config: Launch agent configuration
            output_path: Path where the plist file will be written
        """
        plist_dict = PlistGenerator.generate_plist(config)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(
            dir=output_path.parent, prefix=f".{output_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as f:
                plistlib.dump(plist_dict, f)
            os.replace(tmp_name, output_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    @staticmethod
    def read_plist(path: Path) -> dict[str, Any]:
        """Read a plist file.

        Raises:
            FileNotFoundError: If the plist file doesn't exist
            plistlib.InvalidFileException: If the file is not valid plist
        """
        with open(path, "rb") as f:
            return plistlib.load(f)

    @staticmethod
    def get_launch_agents_dir() -> Path:
        return Path.home() / "Library" / "LaunchAgents"

    @staticmethod
    def get_plist_path(label: str, agents_dir: Path | None = None) -> Path:
        """Get the plist path for a given label.

        Args:
            label: Launch agent label (e.g., 'com.svc.MyTool')
            agents_dir: Directory holding launch agents, defaults to
                ~/Library/LaunchAgents

        Returns:
            Path to the plist file
        """
        return (agents_dir or PlistGenerator.get_launch_agents_dir()) / f"{label}.plist"
