"""Configuration management."""

import json
import os
from pathlib import Path
from typing import Optional


def get_xattach_dir() -> Path:
    """Get the xattach data directory (XDG-compliant)."""
    if env_dir := os.environ.get("XATTACH_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "xattach"


class Config:
    """Application configuration."""

    def __init__(self, xattach_dir: Optional[Path] = None):
        """Load config from directory."""
        self.xattach_dir = xattach_dir or get_xattach_dir()
        self._config_file = self.xattach_dir / "config.json"
        self._load()

    def _load(self):
        """Load config from file."""
        from xattach.utils.constants import DEFAULT_XRANDR_COMMAND

        # Set defaults
        self.debug = False
        self.xrandr_command = DEFAULT_XRANDR_COMMAND
        # Env var overrides
        self.env: dict[str, str] = {}

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                self.debug = data.get("debug", False)
                self.xrandr_command = data.get(
                    "xrandr_command", DEFAULT_XRANDR_COMMAND
                )
                self.env = data.get("env", {})
            except (json.JSONDecodeError, IOError):
                pass

        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply env overrides: first from config.env, then from shell XATTACH_* vars."""
        prefix = "XATTACH_"

        def apply_env_dict(env_dict: dict[str, str]):
            for key, value in env_dict.items():
                # Support both XATTACH_FOO and FOO formats in config.env
                if key.startswith(prefix):
                    attr_name = key[len(prefix) :].lower()
                else:
                    attr_name = key.lower()
                # XATTACH_DIR selects the directory, it is not a setting
                if attr_name in ("dir", "env") or not hasattr(self, attr_name):
                    continue
                current = getattr(self, attr_name)
                if isinstance(current, bool):
                    setattr(self, attr_name, value.lower() in ("true", "1", "yes"))
                elif isinstance(current, int):
                    try:
                        setattr(self, attr_name, int(value))
                    except ValueError:
                        pass
                else:
                    setattr(self, attr_name, value)

        apply_env_dict(self.env)

        # Shell env vars win
        shell_env = {k: v for k, v in os.environ.items() if k.startswith(prefix)}
        apply_env_dict(shell_env)

    def save(self):
        """Save config to file."""
        self.xattach_dir.mkdir(parents=True, exist_ok=True)
        data = {
            "debug": self.debug,
            "xrandr_command": self.xrandr_command,
            "env": self.env,
        }
        self._config_file.write_text(json.dumps(data, indent=2))

    def set_debug(self, enabled: bool):
        """Enable or disable debug mode."""
        self.debug = enabled
        self.save()

    @property
    def log_path(self) -> Path:
        """Path to debug log."""
        return self.xattach_dir / "debug.log"
