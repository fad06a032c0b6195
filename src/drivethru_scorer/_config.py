# Area: Shared
"""
drivethru_scorer._config - Runtime Configuration
================================================

Loads configuration from an optional JSON file, a .env file and the
process environment, in that order of precedence (environment wins).
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger("drivethru_scorer")

DEFAULT_CONFIG: Dict[str, Any] = {
    "db_path": "drivethru.db",
    "log_file": "drivethru.log",
    "log_level": "INFO",
}

# Environment variable -> config key
ENV_MAPPINGS = {
    "DRIVETHRU_DB_PATH": "db_path",
    "DRIVETHRU_LOG_FILE": "log_file",
    "DRIVETHRU_LOG_LEVEL": "log_level",
}

REQUIRED_CONFIG_KEYS = [
    "db_path",
]


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the configuration dict.

    Args:
        config_path: Optional path to a JSON config file

    Returns:
        Configuration with defaults filled in
    """
    load_dotenv(find_dotenv(usecwd=True))
    config: Dict[str, Any] = dict(DEFAULT_CONFIG)

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                config.update(json.load(f))
        else:
            logger.warning(f"Config file not found: {config_path}")

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            config[config_key] = os.environ[env_key]

    return config


def validate_config(config: dict) -> None:
    """
    Validate required configuration keys.

    Args:
        config: Configuration dict

    Raises:
        ValueError: If required keys are missing or empty
    """
    missing = [k for k in REQUIRED_CONFIG_KEYS if not config.get(k)]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")


def resolve_log_level(config: dict) -> int:
    """Translate the configured level name into a logging constant."""
    name = str(config.get("log_level", "INFO")).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
