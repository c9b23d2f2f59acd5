"""
config_store.py - AI Settings Persistence

Stores API key, base URL and model as JSON in the per-user config directory.
"""

import json
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

APP_DIR_NAME = "FileRenaming"
CONFIG_FILE_NAME = "ai_config.json"

DEFAULT_BASE_URL = "https://api.siliconflow.cn/v1"
DEFAULT_MODEL = "deepseek-ai/DeepSeek-V3"


class ConfigError(Exception):
    """Config file could not be read or written"""


@dataclass
class AIConfig:
    """Settings for the remote name generator"""
    api_key: str = ""
    base_url: str = ""
    model: str = ""

    def effective_base_url(self) -> str:
        return self.base_url or DEFAULT_BASE_URL

    def effective_model(self) -> str:
        return self.model or DEFAULT_MODEL

    def to_dict(self) -> dict:
        return {"apiKey": self.api_key, "baseURL": self.base_url, "model": self.model}

    @classmethod
    def from_dict(cls, data: dict) -> "AIConfig":
        return cls(
            api_key=str(data.get("apiKey") or ""),
            base_url=str(data.get("baseURL") or ""),
            model=str(data.get("model") or ""),
        )


def get_config_dir() -> Path:
    """Per-user application config directory"""
    if sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    elif sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming")
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return base / APP_DIR_NAME


def _config_path(config_dir: Optional[Path]) -> Path:
    return Path(config_dir or get_config_dir()) / CONFIG_FILE_NAME


def load_config(config_dir: Optional[Path] = None) -> AIConfig:
    """
    Load AI config

    Args:
        config_dir: Override the config directory (tests)

    Returns:
        Stored config, or an empty one if nothing was saved yet

    Raises:
        ConfigError: File exists but cannot be read or parsed
    """
    path = _config_path(config_dir)
    if not path.exists():
        return AIConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Failed to read config file {path}: {e}") from e
    except ValueError as e:
        raise ConfigError(f"Failed to parse config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Failed to parse config file {path}: expected a JSON object")
    return AIConfig.from_dict(data)


def save_config(config: AIConfig, config_dir: Optional[Path] = None) -> Path:
    """Save AI config, returns the file written"""
    path = _config_path(config_dir)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(config.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to write config file {path}: {e}") from e

    logger.info("Saved AI config to %s", path)
    return path
