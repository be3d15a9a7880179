# src/rapidtube/app/config.py
"""
Configuration Management for rapidtube
Environment variable settings with an optional YAML file for the API key
"""

import yaml
import logging
import threading
from pathlib import Path
from typing import Dict, Any, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rapidtube.domain.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "configs/rapidtube.yaml"


# ============================================================================
# Core Configuration Classes
# ============================================================================


class RapidAPISettings(BaseSettings):
    """RapidAPI client settings"""

    model_config = SettingsConfigDict(env_prefix="RAPIDAPI_")

    key: str = Field(default="", description="RapidAPI key (X-RapidAPI-Key)")

    # Host overrides (empty = client default)
    channel_videos_host: str = Field(
        default="", description="Channel videos service host"
    )
    transcript_host: str = Field(default="", description="Transcript service host")

    # Rate Limiting (None = client default: 3/s channel videos, 10/s transcript)
    channel_videos_rate: Optional[float] = Field(
        default=None, gt=0, description="Channel videos requests per second"
    )
    transcript_rate: Optional[float] = Field(
        default=None, gt=0, description="Transcript requests per second"
    )

    request_timeout: float = Field(
        default=30.0, gt=0, description="Request timeout in seconds"
    )

    @field_validator("channel_videos_host", "transcript_host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Hosts are bare names; the clients always use https"""
        v = v.strip()
        if "://" in v:
            raise ValueError("Host must not include a scheme (use e.g. 'api.example.com')")
        return v


class LoggingConfig(BaseSettings):
    """Logging Configuration"""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )
    file_path: Optional[str] = Field(default=None, description="Log file path")


# ============================================================================
# Main Configuration Class
# ============================================================================


class Config:
    """
    Main Configuration
    Aggregates settings modules with unified access
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration

        Args:
            config_path: Optional YAML config file path
        """
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self.yaml_config = self._load_yaml_config()

        self.rapidapi = RapidAPISettings()
        self.logging = LoggingConfig()

    def _load_yaml_config(self) -> Dict[str, Any]:
        """Load YAML configuration file"""
        config_file = Path(self.config_path)

        if not config_file.exists():
            logger.debug(f"Config file not found: {config_file}, using defaults")
            return {}

        with open(config_file, "r", encoding="utf-8") as f:
            try:
                return yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Failed to parse {config_file}: {e}") from e

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot notation key"""
        keys = key.split(".")
        value = self.yaml_config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def resolve_api_key(self, api_key: Optional[str] = None) -> str:
        """
        Pick the API key: argument, then RAPIDAPI_KEY, then the YAML file

        Raises:
            ConfigError: No key configured anywhere
        """
        resolved = api_key or self.rapidapi.key or self.get("rapidapi.api_key")
        if not resolved:
            raise ConfigError(
                "RapidAPI key not found. Set RAPIDAPI_KEY, add rapidapi.api_key "
                f"to {self.config_path} or pass it to the constructor"
            )
        return str(resolved)

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary (API key masked)"""
        rapidapi = self.rapidapi.model_dump()
        rapidapi["key"] = "***" if rapidapi["key"] else ""
        return {
            "rapidapi": rapidapi,
            "logging": self.logging.model_dump(),
        }


# ============================================================================
# Global Configuration Instance (Singleton)
# ============================================================================

_config: Optional[Config] = None
_config_lock = threading.Lock()


def get_config(config_path: Optional[str] = None) -> Config:
    """
    Get or create global configuration instance (Thread-safe singleton)

    Args:
        config_path: Optional path to config file. Only used when the
            instance is first created; call reload_config() to switch files.

    Returns:
        Config instance
    """
    global _config

    if _config is None:
        with _config_lock:
            if _config is None:
                _config = Config(config_path)
                logger.info("✅ Configuration initialized")

    return _config


def reload_config(config_path: Optional[str] = None) -> Config:
    """Force reload configuration"""
    global _config

    with _config_lock:
        _config = Config(config_path)
        logger.info("🔄 Configuration reloaded")

    return _config


def reset_config() -> None:
    """Reset global configuration (mainly for testing)"""
    global _config

    with _config_lock:
        _config = None


# ============================================================================
# Logging
# ============================================================================


def setup_logging(config: Optional[Config] = None) -> None:
    """
    Setup logging based on configuration

    Args:
        config: Config instance (uses global if None)
    """
    import logging.handlers

    if config is None:
        config = get_config()

    log_level = getattr(logging, config.logging.level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(config.logging.format))
    root_logger.addHandler(console_handler)

    if config.logging.file_path:
        log_path = Path(config.logging.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_path,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(config.logging.format))
        root_logger.addHandler(file_handler)

    logger.info(f"📝 Logging configured: level={config.logging.level}")
