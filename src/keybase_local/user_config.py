"""
keybase-local User Configuration

Layered settings for how the library finds and drives Keybase:
- Defaults (hardcoded below)
- User file: ~/.keybase-local/config.json
- Environment: KEYBASE_LOCAL_BINARY, KEYBASE_LOCAL_TIMEOUT, KEYBASE_LOCAL_KBFS_MOUNT

Config structure:
{
  "keybase": {
    "binary": "keybase",         // executable used for every invocation
    "timeout": 30.0,              // seconds before a call is abandoned
    "process_names": ["keybase", "keybase.exe"]
  },
  "kbfs": {
    "mount": "/keybase",
    "process_names": ["kbfsfuse", "kbfsdokan", "kbfs", ...]
  },
  "checks": {
    "require_running": true,      // check the process list before API calls
    "require_logged_in": true
  }
}
"""

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional
from keybase_local.logging_config import logger


DEFAULT_CONFIG = {
    "keybase": {
        "binary": "keybase",
        "timeout": 30.0,
        "process_names": ["keybase", "keybase.exe"],
    },
    "kbfs": {
        "mount": "/keybase",
        "process_names": ["kbfsfuse", "kbfsfuse.exe", "kbfsdokan", "kbfsdokan.exe", "kbfs", "kbfs.exe"],
    },
    "checks": {
        "require_running": True,
        "require_logged_in": True,
    },
}

# Environment variable -> (dotted key, converter)
ENV_OVERRIDES = {
    "KEYBASE_LOCAL_BINARY": ("keybase.binary", str),
    "KEYBASE_LOCAL_TIMEOUT": ("keybase.timeout", float),
    "KEYBASE_LOCAL_KBFS_MOUNT": ("kbfs.mount", str),
}


class UserConfig:
    """
    Manages layered library configuration.

    Load order (with override):
    1. Default config (hardcoded)
    2. User config (~/.keybase-local/config.json)
    3. Environment variables
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize config manager.

        Args:
            config_path: Settings file (defaults to ~/.keybase-local/config.json)
        """
        self.config_path = config_path or Path.home() / ".keybase-local" / "config.json"
        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        config = copy.deepcopy(DEFAULT_CONFIG)

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    config = self._deep_merge(config, json.load(f))
                logger.debug(f"Loaded config from {self.config_path}")
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to load config from {self.config_path}: {e}")

        for env_name, (key, convert) in ENV_OVERRIDES.items():
            raw = os.getenv(env_name)
            if not raw:
                continue
            try:
                self._set_key(config, key, convert(raw))
            except ValueError:
                logger.warning(f"Ignoring invalid {env_name}={raw!r}")

        return config

    def _deep_merge(self, base: Dict, override: Dict) -> Dict:
        """
        Deep merge two dictionaries, with override taking precedence.

        Args:
            base: Base dictionary
            override: Override dictionary

        Returns:
            Merged dictionary
        """
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    @staticmethod
    def _set_key(config: Dict, key: str, value: Any) -> None:
        keys = key.split(".")
        current = config
        for k in keys[:-1]:
            current = current.setdefault(k, {})
        current[keys[-1]] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a config value by dot-separated key.

        Args:
            key: Dot-separated key (e.g., "keybase.binary")
            default: Default value if key not found

        Returns:
            Config value

        Examples:
            config.get("keybase.timeout")  # 30.0
            config.get("checks.require_running")  # True
        """
        value = self._config

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_all(self) -> Dict[str, Any]:
        """Get the entire merged configuration."""
        return copy.deepcopy(self._config)

    def reload(self) -> None:
        """Reload configuration from disk and environment."""
        self._config = self._load_config()


# Global singleton
_config: Optional[UserConfig] = None


def get_user_config() -> UserConfig:
    """Get the user configuration singleton."""
    global _config
    if _config is None:
        _config = UserConfig()
    return _config


def reset_user_config() -> None:
    """Reset the global config singleton (for testing)."""
    global _config
    _config = None
