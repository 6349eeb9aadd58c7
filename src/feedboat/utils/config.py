"""Configuration management."""

import json
import os
import string
from pathlib import Path
from typing import Optional

from feedboat.utils.exceptions import ConfigurationError


def get_feedboat_dir() -> Path:
    """Get the feedboat data directory (XDG-compliant)."""
    if env_dir := os.environ.get("FEEDBOAT_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "feedboat"


class Config:
    """Application configuration."""

    # Toggleable settings with descriptions (attr_name -> description)
    TOGGLES: dict[str, str] = {
        "debug": "Log to ~/.config/feedboat/debug.log",
    }

    # Settings that hold a single key-binding letter
    KEY_BINDINGS: dict[str, str] = {
        "cycle_next_key": "Ctrl+<key> switches to the next dialog",
        "cycle_previous_key": "Ctrl+<key> switches to the previous dialog",
    }

    def __init__(self, feedboat_dir: Optional[Path] = None):
        """Load config from directory."""
        self.feedboat_dir = feedboat_dir or get_feedboat_dir()
        self._config_file = self.feedboat_dir / "config.json"
        self._load()

    def _load(self):
        """Load config from file."""
        from feedboat.utils.constants import (
            DEFAULT_CYCLE_NEXT_KEY,
            DEFAULT_CYCLE_PREVIOUS_KEY,
        )

        # Set defaults
        self.debug = False
        self.cycle_next_key = DEFAULT_CYCLE_NEXT_KEY
        self.cycle_previous_key = DEFAULT_CYCLE_PREVIOUS_KEY
        # Env var overrides persisted in the config file
        self.env: dict[str, str] = {}

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                self.debug = data.get("debug", False)
                self.cycle_next_key = data.get("cycle_next_key", DEFAULT_CYCLE_NEXT_KEY)
                self.cycle_previous_key = data.get(
                    "cycle_previous_key", DEFAULT_CYCLE_PREVIOUS_KEY
                )
                self.env = data.get("env", {})
            except (json.JSONDecodeError, IOError):
                pass

        # Apply env section from config, then shell env vars override
        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply env overrides: first from config.env, then from shell FEEDBOAT_* vars."""
        prefix = "FEEDBOAT_"

        def apply_env_dict(env_dict: dict[str, str]):
            for key, value in env_dict.items():
                # Support both FEEDBOAT_FOO and FOO formats in config.env
                if key.startswith(prefix):
                    attr_name = key[len(prefix) :].lower()
                else:
                    attr_name = key.lower()
                if attr_name in ("dir", "env") or not hasattr(self, attr_name):
                    continue
                current = getattr(self, attr_name)
                if isinstance(current, bool):
                    setattr(self, attr_name, value.lower() in ("true", "1", "yes"))
                else:
                    setattr(self, attr_name, value)

        apply_env_dict(self.env)

        # Shell env vars have the highest priority
        shell_env = {k: v for k, v in os.environ.items() if k.startswith(prefix)}
        apply_env_dict(shell_env)

    def validate(self) -> None:
        """Check key bindings before they are handed to the input router.

        Raises:
            ConfigurationError: If a binding is not a single lowercase letter,
                is a reserved Ctrl chord, or both cycle directions use the
                same letter.
        """
        from feedboat.utils.constants import RESERVED_CTRL_KEYS

        for attr in self.KEY_BINDINGS:
            value = getattr(self, attr)
            if (
                not isinstance(value, str)
                or len(value) != 1
                or value not in string.ascii_lowercase
            ):
                raise ConfigurationError(
                    f"{attr} must be a single lowercase letter, got {value!r}"
                )
            if value in RESERVED_CTRL_KEYS:
                raise ConfigurationError(
                    f"{attr} cannot be {value!r}: {RESERVED_CTRL_KEYS[value]}"
                )
        if self.cycle_next_key == self.cycle_previous_key:
            raise ConfigurationError(
                f"cycle_next_key and cycle_previous_key are both {self.cycle_next_key!r}"
            )

    def save(self):
        """Save config to file."""
        self.feedboat_dir.mkdir(parents=True, exist_ok=True)
        data = {
            "debug": self.debug,
            "cycle_next_key": self.cycle_next_key,
            "cycle_previous_key": self.cycle_previous_key,
            "env": self.env,
        }
        self._config_file.write_text(json.dumps(data, indent=2))

    def set_value(self, key: str, value: str) -> None:
        """Set a toggle or key binding from its string form and persist it.

        Raises:
            ConfigurationError: For unknown keys or invalid bindings.
        """
        if key in self.TOGGLES:
            self.set_toggle(key, value.lower() in ("true", "1", "yes", "on"))
            return
        if key not in self.KEY_BINDINGS:
            known = ", ".join([*self.TOGGLES, *self.KEY_BINDINGS])
            raise ConfigurationError(f"Unknown config key {key!r} (known: {known})")

        old = getattr(self, key)
        setattr(self, key, value)
        try:
            self.validate()
        except ConfigurationError:
            setattr(self, key, old)
            raise
        self.save()

    def set_env(self, key: str, value: str):
        """Set an env var override in config."""
        self.env[key] = value
        self.save()
        # Re-apply to update attributes
        self._apply_env_overrides()

    def unset_env(self, key: str) -> bool:
        """Remove an env var override. Returns True if key existed."""
        if key in self.env:
            del self.env[key]
            self.save()
            return True
        return False

    def list_env(self) -> dict[str, str]:
        """List all env var overrides."""
        return self.env.copy()

    def get_toggles(self) -> list[tuple[str, str, bool]]:
        """Get all toggleable settings with current values.

        Returns list of (attr_name, description, is_enabled).
        """
        result = []
        for attr, desc in self.TOGGLES.items():
            value = getattr(self, attr, False)
            result.append((attr, desc, bool(value)))
        return result

    def set_toggle(self, attr: str, enabled: bool):
        """Set a toggle value and persist it."""
        if attr not in self.TOGGLES:
            return
        setattr(self, attr, enabled)
        self.save()

    def set_debug(self, enabled: bool):
        """Enable or disable debug mode."""
        self.debug = enabled
        self.save()

    @property
    def log_path(self) -> Path:
        """Path to the debug log."""
        return self.feedboat_dir / "debug.log"
