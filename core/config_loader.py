import yaml
import os
import logging
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.yaml"


class CoefficientsConfig(BaseModel):
    """Location of the coefficient schema JSON document."""
    # Relative paths are resolved against the config file's directory
    path: str = "skill_coefficients.json"


class WebConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8080


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class AppConfig(BaseModel):
    coefficients: CoefficientsConfig = Field(default_factory=CoefficientsConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides on top of the YAML values."""
    env_schema_path = os.environ.get("SCHEMA_PATH")
    if env_schema_path:
        data.setdefault('coefficients', {})
        data['coefficients']['path'] = env_schema_path

    env_web_host = os.environ.get("WEB_HOST")
    if env_web_host:
        data.setdefault('web', {})
        data['web']['host'] = env_web_host

    env_web_port = os.environ.get("WEB_PORT")
    if env_web_port:
        data.setdefault('web', {})
        data['web']['port'] = int(env_web_port)

    env_log_level = os.environ.get("LOG_LEVEL")
    if env_log_level:
        data.setdefault('logging', {})
        data['logging']['level'] = env_log_level.upper()

    return data


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load application configuration.

    Reads the YAML file if it exists (missing file means defaults), applies
    environment overrides and resolves a relative schema path against the
    config file's directory.
    """
    config_path = config_path or os.environ.get("APP_CONFIG", DEFAULT_CONFIG_PATH)

    data: Dict[str, Any] = {}
    if os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.info(f"Config file {config_path} not found, using defaults")

    data = _apply_env_overrides(data)
    config = AppConfig(**data)

    schema_path = config.coefficients.path
    if not os.path.isabs(schema_path):
        base_dir = os.path.dirname(os.path.abspath(config_path))
        config.coefficients.path = os.path.normpath(os.path.join(base_dir, schema_path))

    return config
