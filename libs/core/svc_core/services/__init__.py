from svc_core.services.config_manager import CONFIG_ENV_VAR, CONFIG_FILENAME, ConfigManager

__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_FILENAME",
    "ConfigManager",
]
