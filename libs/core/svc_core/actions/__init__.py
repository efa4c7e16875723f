"""Actions module encapsulating business logic for CLI operations."""

from svc_core.actions.service_actions import ServiceActions

__all__ = [
    "ServiceActions",
]
