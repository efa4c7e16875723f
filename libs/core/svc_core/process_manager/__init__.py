"""Process manager module: command resolution, process matching and startup registration."""

from svc_core.process_manager.command_resolver import interpreter_binary_for, resolve
from svc_core.process_manager.launchctl_manager import LaunchctlManager
from svc_core.process_manager.plist_generator import PlistGenerator
from svc_core.process_manager.process_controller import ProcessController
from svc_core.process_manager.process_matcher import ProcessMatcher, normalize_path, paths_match
from svc_core.process_manager.registrar import UnsupportedRegistrar, get_registrar
from svc_core.process_manager.registry_manager import RegistryRunKeyManager

__all__ = [
    "LaunchctlManager",
    "PlistGenerator",
    "ProcessController",
    "ProcessMatcher",
    "RegistryRunKeyManager",
    "UnsupportedRegistrar",
    "get_registrar",
    "interpreter_binary_for",
    "normalize_path",
    "paths_match",
    "resolve",
]
