"""Configuration loading and validation for RollingTime."""

import math
import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from .constants import (
    DEFAULT_TAU,
    DEFAULT_LOG_LEVEL,
    DEFAULT_CONSOLE_LEVEL,
    DEFAULT_LOG_MAX_BYTES,
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_SNAPSHOTS_FILENAME,
)
from .errors import WindowConfigError


class Config:
    """Configuration container with environment variable overrides."""

    def __init__(self, config_path: str = None, create_if_missing: bool = False):
        """
        Load configuration from YAML file with environment variable overrides.

        Configuration precedence (highest to lowest):
        1. Environment variables (RT_* prefix)
        2. config.local.yaml (if exists, local overrides)
        3. config.yaml (main config file)
        4. Default values

        Args:
            config_path: Path to config.yaml. If None, searches for config.yaml
                        in current directory and parent directories.
            create_if_missing: If True and config_path is None, write a default
                              config.yaml when none is found. If config_path is
                              explicitly provided, this is ignored (file must exist).
        """
        self.path: Optional[Path] = None
        self._raw: Dict[str, Any] = {}

        if config_path is None:
            config_file_path = Path(self._find_config_file())
            if create_if_missing and not config_file_path.exists():
                self._create_default_config(config_file_path)
        else:
            # Explicit path provided - must exist
            config_file_path = Path(config_path)
            if not config_file_path.exists():
                raise FileNotFoundError(f"Config file not found: {config_path}")

        if config_file_path.exists():
            self.path = config_file_path
            with open(config_file_path, 'r', encoding="utf-8") as f:
                self._raw = yaml.safe_load(f) or {}

            # Local overrides sit next to the main file
            local_config_path = config_file_path.parent / "config.local.yaml"
            if local_config_path.exists():
                with open(local_config_path, 'r', encoding="utf-8") as f:
                    local_config = yaml.safe_load(f) or {}
                    self._deep_merge(self._raw, local_config)

        # Apply environment variable overrides (highest precedence)
        self._apply_env_overrides()

        # Validate and normalize
        self._validate()

    def _find_config_file(self) -> str:
        """Find config.yaml in current directory or parents."""
        current = Path.cwd()
        for path in [current] + list(current.parents):
            config_file = path / "config.yaml"
            if config_file.exists():
                return str(config_file)
        # Default to current directory if not found
        return str(current / "config.yaml")

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override dict into base dict."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _create_default_config(self, path: Path):
        """Create a default config.yaml file."""
        default_config = {
            "window": {
                "tau": DEFAULT_TAU
            },
            "logging": {
                "level": DEFAULT_LOG_LEVEL,
                "console_level": DEFAULT_CONSOLE_LEVEL,
                "log_dir": "",
                "rotation": {
                    "max_bytes": DEFAULT_LOG_MAX_BYTES,
                    "backup_count": DEFAULT_LOG_BACKUP_COUNT
                }
            },
            "structured_output": {
                "enabled": False,
                "base_dir": "logs/structured",
                "snapshots_filename": DEFAULT_SNAPSHOTS_FILENAME
            }
        }
        with open(path, 'w', encoding="utf-8") as f:
            yaml.dump(default_config, f, default_flow_style=False, sort_keys=False)

    def _apply_env_overrides(self):
        """Apply environment variable overrides using RT_ prefix."""
        # Window settings
        if os.getenv("RT_TAU"):
            self._raw.setdefault("window", {})["tau"] = float(os.getenv("RT_TAU"))

        # Logging settings
        if os.getenv("RT_LOG_DIR"):
            self._raw.setdefault("logging", {})["log_dir"] = os.getenv("RT_LOG_DIR")
        if os.getenv("RT_LOG_LEVEL"):
            self._raw.setdefault("logging", {})["level"] = os.getenv("RT_LOG_LEVEL")
        if os.getenv("RT_CONSOLE_LEVEL"):
            self._raw.setdefault("logging", {})["console_level"] = os.getenv("RT_CONSOLE_LEVEL")

        # Structured output settings
        if os.getenv("RT_STRUCTURED_ENABLED"):
            self._raw.setdefault("structured_output", {})["enabled"] = os.getenv("RT_STRUCTURED_ENABLED").lower() == "true"
        if os.getenv("RT_STRUCTURED_DIR"):
            self._raw.setdefault("structured_output", {})["base_dir"] = os.getenv("RT_STRUCTURED_DIR")

    def _validate(self):
        """Validate and normalize configuration values."""
        tau = self._raw.get("window", {}).get("tau", DEFAULT_TAU)
        if isinstance(tau, bool) or not isinstance(tau, (int, float)) \
                or not math.isfinite(tau) or tau <= 0:
            raise WindowConfigError(tau, f"window.tau must be a positive finite number, got: {tau!r}")

    @property
    def tau(self) -> float:
        return self._raw.get("window", {}).get("tau", DEFAULT_TAU)

    @property
    def log_level(self) -> str:
        return self._raw.get("logging", {}).get("level", DEFAULT_LOG_LEVEL)

    @property
    def console_level(self) -> str:
        return self._raw.get("logging", {}).get("console_level", DEFAULT_CONSOLE_LEVEL)

    @property
    def log_dir(self) -> str:
        return self._raw.get("logging", {}).get("log_dir", "") or ""

    @property
    def log_rotation(self) -> Dict[str, Any]:
        """Get log rotation configuration with defaults."""
        rotation = self._raw.get("logging", {}).get("rotation", {})
        return {
            "max_bytes": int(rotation.get("max_bytes", DEFAULT_LOG_MAX_BYTES)),
            "backup_count": int(rotation.get("backup_count", DEFAULT_LOG_BACKUP_COUNT))
        }

    @property
    def structured_output_config(self) -> Dict[str, Any]:
        """Get structured output configuration with defaults."""
        cfg = self._raw.get("structured_output", {})
        default_dir = str(Path(self.log_dir or "logs") / "structured")
        return {
            "enabled": cfg.get("enabled", False),
            "base_dir": cfg.get("base_dir", default_dir),
            "snapshots_filename": cfg.get("snapshots_filename", DEFAULT_SNAPSHOTS_FILENAME),
        }
