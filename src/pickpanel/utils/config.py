"""Configuration management."""

import json
import os
from pathlib import Path
from typing import Optional

from pickpanel.utils.constants import DEFAULT_BORDER_STYLE
from pickpanel.utils.exceptions import ConfigurationError

ENV_PREFIX = "PICKPANEL_"


def get_pickpanel_dir() -> Path:
    """Get the pickpanel data directory (XDG-compliant)."""
    if env_dir := os.environ.get("PICKPANEL_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "pickpanel"


def _setting_name(key: str) -> str:
    """Map PICKPANEL_FOO or FOO to the attribute name foo."""
    if key.startswith(ENV_PREFIX):
        key = key[len(ENV_PREFIX) :]
    return key.lower()


class Config:
    """Application configuration."""

    # Settings that may be overridden (attr_name -> description)
    SETTINGS: dict[str, str] = {
        "debug": "Log to ~/.config/pickpanel/debug.log",
        "border_style": "Rich style for the panel border",
    }

    def __init__(self, pickpanel_dir: Optional[Path] = None):
        """Load config from directory."""
        self.pickpanel_dir = pickpanel_dir or get_pickpanel_dir()
        self._config_file = self.pickpanel_dir / "config.json"
        self._load()

    def _load(self):
        """Load config from file."""
        # Set defaults
        self.debug = False
        self.border_style = DEFAULT_BORDER_STYLE
        # Persisted env var overrides
        self.env: dict[str, str] = {}

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                self.debug = data.get("debug", False)
                self.border_style = data.get("border_style", DEFAULT_BORDER_STYLE)
                self.env = data.get("env", {})
            except (json.JSONDecodeError, IOError):
                pass

        # Apply env section from config, then shell env vars override
        self._apply_env_overrides()

    def _coerce(self, attr_name: str, value: str):
        """Convert a string value based on the current attribute type."""
        current = getattr(self, attr_name)
        if isinstance(current, bool):
            return value.lower() in ("true", "1", "yes")
        return value

    def _apply_env_overrides(self):
        """Apply overrides from config.env, then from shell PICKPANEL_* vars."""

        def apply_env_dict(env_dict: dict[str, str]):
            for key, value in env_dict.items():
                attr_name = _setting_name(key)
                if attr_name not in self.SETTINGS:
                    continue
                setattr(self, attr_name, self._coerce(attr_name, value))

        # First apply config.env (persisted overrides)
        apply_env_dict(self.env)

        # Then apply shell env vars (highest priority)
        shell_env = {k: v for k, v in os.environ.items() if k.startswith(ENV_PREFIX)}
        apply_env_dict(shell_env)

    def _update_file(self, **values):
        """Write only the given keys, leaving other persisted values alone."""
        data = {}
        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
            except (json.JSONDecodeError, IOError):
                pass
        data.update(values)
        self.pickpanel_dir.mkdir(parents=True, exist_ok=True)
        self._config_file.write_text(json.dumps(data, indent=2))

    def set_env(self, key: str, value: str):
        """Set an env var override in config.

        Raises:
            ConfigurationError: If the key names no known setting.
        """
        attr_name = _setting_name(key)
        if attr_name not in self.SETTINGS:
            known = ", ".join(sorted(self.SETTINGS))
            raise ConfigurationError(f"Unknown setting {key!r} (known: {known})")
        self.env[key] = value
        self._update_file(env=self.env)
        # Re-apply to update attributes
        self._apply_env_overrides()

    def unset_env(self, key: str) -> bool:
        """Remove an env var override. Returns True if key existed."""
        if key in self.env:
            del self.env[key]
            self._update_file(env=self.env)
            # Drop the override from attributes too
            self._load()
            return True
        return False

    def list_env(self) -> dict[str, str]:
        """List all env var overrides."""
        return self.env.copy()

    def set_debug(self, enabled: bool):
        """Enable or disable debug mode."""
        self.debug = enabled
        self._update_file(debug=enabled)

    @property
    def log_path(self) -> Path:
        """Path to debug log file."""
        return self.pickpanel_dir / "debug.log"
