"""svc core package"""

from svc_core.actions import ServiceActions
from svc_core.errors import (
    ConfigError,
    KillError,
    LaunchError,
    NotFoundError,
    RegistrationError,
    SvcError,
)
from svc_core.process_manager import (
    ProcessController,
    ProcessMatcher,
    get_registrar,
    resolve,
)

__version__ = "1.1.0"

__all__ = [
    # Actions
    "ServiceActions",
    # Errors
    "ConfigError",
    "KillError",
    "LaunchError",
    "NotFoundError",
    "RegistrationError",
    "SvcError",
    # Process Manager
    "ProcessController",
    "ProcessMatcher",
    "get_registrar",
    "resolve",
]
