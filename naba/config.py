"""Configuration management for the application."""

from pathlib import Path

import yaml
from loguru import logger
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings

from naba.errors import ConfigError


DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash-exp-image-generation"
CONFIG_FILE_NAME = "config.yaml"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Credentials
    gemini_api_key: str | None = Field(default=None, description="Gemini API key")

    # API Configuration
    gemini_base_url: str = Field(default=DEFAULT_BASE_URL, description="Gemini API base URL")
    gemini_model: str = Field(default=DEFAULT_MODEL, description="Default Gemini model")

    # Timeout Configuration
    timeout: int = Field(default=120, description="Request timeout in seconds")

    # Persisted config location
    naba_config_dir: Path | None = Field(
        default=None, description="Directory holding config.yaml (default ~/.config/naba)"
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Log level for the stderr sink")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def config_dir(self) -> Path:
        if self.naba_config_dir:
            return Path(self.naba_config_dir)
        return Path.home() / ".config" / "naba"

    @property
    def config_path(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME


VALID_KEYS = ("api_key", "model", "default_output_dir")


class ConfigFile(BaseModel):
    """Values persisted in ``config.yaml``."""

    api_key: str = ""
    model: str = ""
    default_output_dir: str = ""

    def get(self, key: str) -> str:
        if key not in VALID_KEYS:
            return ""
        return getattr(self, key)

    def set(self, key: str, value: str) -> bool:
        if key not in VALID_KEYS:
            return False
        setattr(self, key, value)
        return True


def load_config_file(settings: Settings) -> ConfigFile:
    """Read the config file. A missing file yields an empty config.

    Raises:
        ConfigError: the file exists but cannot be read or is not a YAML mapping
    """
    path = settings.config_path
    if not path.exists():
        return ConfigFile()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"load config {path}: {e}") from e

    if raw is None:
        return ConfigFile()
    if not isinstance(raw, dict):
        raise ConfigError(f"load config {path}: expected a mapping")

    try:
        return ConfigFile(**{k: str(v) for k, v in raw.items() if k in VALID_KEYS and v is not None})
    except ValidationError as e:
        raise ConfigError(f"load config {path}: {e}") from e


def save_config_file(config: ConfigFile, settings: Settings) -> Path:
    """Write the config file, creating its directory. Empty values are omitted."""
    path = settings.config_path
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {k: v for k, v in config.model_dump().items() if v}
    path.write_text(yaml.safe_dump(data, default_flow_style=False), encoding="utf-8")
    logger.debug(f"Saved config to {path}")
    return path


def resolve_api_key(settings: Settings) -> str:
    """Return the API key from the environment, falling back to the config file."""
    if settings.gemini_api_key:
        return settings.gemini_api_key
    try:
        return load_config_file(settings).api_key
    except ConfigError as e:
        logger.warning(f"Ignoring unreadable config while resolving API key: {e}")
        return ""


def resolve_model(settings: Settings, override: str | None = None) -> str:
    """Pick the model: explicit override, then config file, then settings default."""
    if override:
        return override
    try:
        model = load_config_file(settings).model
    except ConfigError as e:
        logger.warning(f"Ignoring unreadable config while resolving model: {e}")
        model = ""
    return model or settings.gemini_model
