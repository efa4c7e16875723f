import os
import sys
from pathlib import Path

import yaml
from dotenv import find_dotenv, load_dotenv

from svc_core.errors import ConfigError
from svc_core.models.config import LoggingConfig, SvcConfig
from svc_core.models.entry import ServiceConfig

CONFIG_ENV_VAR = "SVC_CONFIG"
CONFIG_FILENAME = "services.yaml"


class ConfigManager:
    """Locate and load the services configuration.

    Lookup order: explicit path, $SVC_CONFIG, ./services.yaml,
    services.yaml next to the running executable, ~/.svc/services.yaml.
    A .env file in the working directory (or a parent) is loaded first so
    SVC_CONFIG may be set there.
    """

    def __init__(self, config_path: Path | str | None = None):
        dotenv_path = find_dotenv(usecwd=True)
        if dotenv_path:
            load_dotenv(dotenv_path)

        self.config_path = Path(config_path).expanduser() if config_path else self._locate()

    @staticmethod
    def candidate_paths() -> list[Path]:
        candidates = []
        env_path = os.getenv(CONFIG_ENV_VAR)
        if env_path:
            candidates.append(Path(env_path).expanduser())
        candidates.append(Path.cwd() / CONFIG_FILENAME)
        if sys.argv and sys.argv[0]:
            candidates.append(Path(sys.argv[0]).resolve().parent / CONFIG_FILENAME)
        candidates.append(Path.home() / ".svc" / CONFIG_FILENAME)
        return candidates

    def _locate(self) -> Path:
        candidates = self.candidate_paths()
        if os.getenv(CONFIG_ENV_VAR):
            # An explicit environment setting is never silently skipped.
            return candidates[0]
        for candidate in candidates:
            if candidate.is_file():
                return candidate
        return candidates[-1]

    def load_config(self) -> SvcConfig:
        """Read and validate the configuration file.

        Raises:
            ConfigError: If the file is missing, not valid YAML, or
                describes invalid entries
        """
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise ConfigError(f"Configuration file not found: {self.config_path}") from None
        except OSError as e:
            raise ConfigError(f"Cannot read {self.config_path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.config_path}: {e}") from e

        return self.parse(data, source=self.config_path)

    @staticmethod
    def parse(data, source: Path | None = None) -> SvcConfig:
        """Build an SvcConfig from already-parsed YAML data."""
        if data is None:
            return SvcConfig(source=source)

        # A bare list is the plain format; a mapping adds settings.
        if isinstance(data, list):
            return SvcConfig(services=ServiceConfig.from_records(data), source=source)

        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a list of services or a mapping")

        unknown = set(data) - {"services", "logging"}
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        logging_config = LoggingConfig()
        if data.get("logging") is not None:
            if not isinstance(data["logging"], dict):
                raise ConfigError("'logging' must be a mapping")
            try:
                logging_config = LoggingConfig(**data["logging"])
            except TypeError as e:
                raise ConfigError(f"Invalid logging configuration: {e}") from e

        return SvcConfig(
            services=ServiceConfig.from_records(data.get("services")),
            logging=logging_config,
            source=source,
        )

    @property
    def config(self) -> SvcConfig:
        return self.load_config()
