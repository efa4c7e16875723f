"""Exception types raised by svc operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from svc_core.models.process import KillReport


class SvcError(Exception):
    """Base class for every error the CLI reports with a non-zero exit."""


class ConfigError(SvcError):
    """The configuration file is missing, unreadable or malformed."""


class NotFoundError(SvcError):
    """No entry with the requested name exists in the configuration."""

    def __init__(self, name: str):
        super().__init__(f"Service {name} not found in the configuration.")
        self.name = name


class RegistrationError(SvcError):
    """The OS startup registration could not be installed or removed."""


class LaunchError(SvcError):
    """The OS refused to create the process."""


class KillError(SvcError):
    """Nothing matched the entry's executable, so nothing was terminated."""

    def __init__(self, message: str, report: KillReport):
        super().__init__(message)
        self.report = report
