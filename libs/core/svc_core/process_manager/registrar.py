"""Pick the startup registration mechanism for the running platform."""

import sys
from collections.abc import Sequence

from svc_core.errors import RegistrationError
from svc_core.interfaces import StartupRegistrar
from svc_core.process_manager.launchctl_manager import LaunchctlManager
from svc_core.process_manager.registry_manager import RegistryRunKeyManager


class UnsupportedRegistrar:
    """Registrar for platforms without a supported login-time mechanism."""

    def __init__(self, platform: str):
        self.platform = platform

    def _fail(self) -> RegistrationError:
        return RegistrationError(f"Startup registration is not supported on {self.platform}")

    def register(
        self,
        name: str,
        program: str,
        arguments: Sequence[str],
        working_directory: str,
    ) -> None:
        raise self._fail()

    def unregister(self, name: str) -> None:
        raise self._fail()

    def is_registered(self, name: str) -> bool:
        raise self._fail()


def get_registrar(platform: str | None = None) -> StartupRegistrar:
    """Return the registrar for `platform` (defaults to sys.platform)."""
    platform = platform or sys.platform
    if platform == "win32":
        return RegistryRunKeyManager()
    if platform == "darwin":
        return LaunchctlManager()
    return UnsupportedRegistrar(platform)
