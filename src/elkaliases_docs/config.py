"""Configuration management for the ElkAliases documentation site.

Loads configuration from environment variables and .env file.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional


DEFAULTS: Dict[str, str] = {
    "LOG_LEVEL": "INFO",
    "LOG_DIR": "",
    "DOCS_HOST": "0.0.0.0",
    "DOCS_PORT": "4567",
    "ACTIVE_CLASS": "active",
    "SITE_OUTPUT_DIR": "build",
}


def find_env_file() -> Optional[Path]:
    """Find the .env file by searching up the directory tree.

    Returns:
        Path to .env file if found, None otherwise
    """
    current_dir = Path(__file__).parent.resolve()

    for parent in [current_dir] + list(current_dir.parents):
        env_path = parent / ".env"
        if env_path.is_file():
            return env_path
        # Stop at project root indicators
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            break

    return None


class Config:
    """Configuration manager that loads from .env file and environment variables.

    Environment variables take precedence over .env file values, and both
    take precedence over DEFAULTS. Attribute access is case-insensitive.
    """

    def __init__(self, env_file: Optional[str] = None):
        """Initialize configuration.

        Args:
            env_file: Optional path to .env file. If not provided, will search
                      for .env file in parent directories.
        """
        self._attributes: dict[str, str] = {}

        for key, value in DEFAULTS.items():
            self._set(key, value)

        if env_file:
            env_path: Optional[Path] = Path(env_file)
        else:
            env_path = find_env_file()

        if env_path and env_path.is_file():
            self._load_env_file(env_path)
        self._load_from_environ()

    def _set(self, key: str, value: str) -> None:
        self._attributes[key] = value
        self._attributes[key.lower()] = value

    def _load_env_file(self, path: Path) -> None:
        """Load configuration from .env file.

        Args:
            path: Path to the .env file
        """
        with open(path, "r", encoding="utf-8") as file:
            for line in file:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue

                key, value = line.split("=", 1)
                key = key.strip()
                value = value.strip().strip('"').strip("'")
                self._set(key, value)

    def _load_from_environ(self) -> None:
        """Overlay known keys from environment variables."""
        for key in DEFAULTS:
            value = os.environ.get(key)
            if value:
                self._set(key, value)

    def __getattr__(self, name: str) -> str:
        """Get configuration value by attribute name.

        Raises:
            AttributeError: If configuration key is not found
        """
        if name.startswith("_"):
            raise AttributeError(f"'Config' object has no attribute '{name}'")

        if name in self._attributes:
            return self._attributes[name]
        if name.lower() in self._attributes:
            return self._attributes[name.lower()]

        env_value = os.environ.get(name) or os.environ.get(name.upper())
        if env_value:
            return env_value

        raise AttributeError(f"'Config' object has no attribute '{name}'")

    def get(self, name: str, default: Any = None) -> Any:
        """Get configuration value with optional default."""
        try:
            return getattr(self, name)
        except AttributeError:
            return default

    def require(self, name: str) -> str:
        """Get a configuration value, raising MissingConfigError when unset."""
        from .utils.exceptions import MissingConfigError

        value = self.get(name)
        if not value:
            raise MissingConfigError(name.upper())
        return value

    def get_int(self, name: str) -> int:
        """Get an integer configuration value."""
        from .utils.exceptions import ConfigurationError

        raw = self.require(name)
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationError(
                f"Configuration value {name.upper()} is not an integer",
                {"config_key": name.upper(), "value": raw},
            )


# Create singleton config instance
config = Config()
