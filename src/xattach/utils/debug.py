"""Debug logging utility."""

import sys
from datetime import datetime

from xattach.utils.config import Config, get_xattach_dir

_config = None


def _get_config() -> Config:
    """Get cached config instance."""
    global _config
    if _config is None:
        _config = Config(get_xattach_dir())
    return _config


def reload_config():
    """Reload config (call after debug mode changes)."""
    global _config
    _config = None


def _log_to_file(line: str):
    """Append line to debug log file."""
    config = _get_config()
    try:
        config.xattach_dir.mkdir(parents=True, exist_ok=True)
        with open(config.log_path, "a") as f:
            f.write(line + "\n")
    except OSError:
        pass


def debug(category: str, message: str, to_stderr: bool = True, **kwargs):
    """Log debug message if debug mode is enabled.

    Args:
        category: Category like 'menu', 'terminal', 'xrandr'
        message: Debug message
        to_stderr: Also echo to stderr (off while a menu owns the terminal)
        **kwargs: Additional key=value pairs to log
    """
    config = _get_config()
    if not config.debug:
        return

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    extras = " ".join(f"{k}={v}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[xattach:{category}] {timestamp} {message}"
    if extras:
        line += f" | {extras}"

    _log_to_file(line)
    if not to_stderr:
        return
    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass


def debug_menu(message: str, **kwargs):
    """Log menu-related debug message (file only, the menu owns the tty)."""
    debug("menu", message, to_stderr=False, **kwargs)


def debug_terminal(message: str, **kwargs):
    """Log terminal-related debug message (file only)."""
    debug("terminal", message, to_stderr=False, **kwargs)


def debug_xrandr(message: str, **kwargs):
    """Log xrandr-related debug message."""
    debug("xrandr", message, **kwargs)
