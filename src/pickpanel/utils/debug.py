"""Debug logging utility."""

import sys
from datetime import datetime

from pickpanel.utils.config import Config, get_pickpanel_dir

_config = None
_echo_stderr = True


def _get_config() -> Config:
    """Get cached config instance."""
    global _config
    if _config is None:
        _config = Config(get_pickpanel_dir())
    return _config


def reload_config():
    """Reload config (call after debug mode changes)."""
    global _config
    _config = None


def set_stderr_echo(enabled: bool) -> bool:
    """Toggle echoing debug lines to stderr. Returns the previous setting.

    Interactive overlays draw on stderr, so they switch echo off while a
    panel is on screen. The log file is written either way.
    """
    global _echo_stderr
    previous = _echo_stderr
    _echo_stderr = enabled
    return previous


def _log_to_file(line: str):
    """Append line to debug log file."""
    try:
        with open(_get_config().log_path, "a") as f:
            f.write(line + "\n")
    except OSError:
        pass


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Args:
        category: Category like 'key', 'overlay', 'stack'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    config = _get_config()
    if not config.debug:
        return

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    extras = " ".join(f"{k}={v}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[pickpanel:{category}] {timestamp} {message}"
    if extras:
        line += f" | {extras}"

    _log_to_file(line)
    if not _echo_stderr:
        return
    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass  # Parent process closed stderr, continue silently


def debug_key(message: str, **kwargs):
    """Log key-classification debug message."""
    debug("key", message, **kwargs)


def debug_overlay(message: str, **kwargs):
    """Log overlay state-transition debug message."""
    debug("overlay", message, **kwargs)


def debug_stack(message: str, **kwargs):
    """Log overlay-stack debug message."""
    debug("stack", message, **kwargs)
