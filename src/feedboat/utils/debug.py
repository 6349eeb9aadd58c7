"""Debug logging utility.

The dashboard owns the terminal while it runs, so log lines only ever go to
the debug log file, never to stderr.
"""

from datetime import datetime

from feedboat.utils.config import Config, get_feedboat_dir

_config = None


def _get_config() -> Config:
    """Get cached config instance."""
    global _config
    if _config is None:
        _config = Config(get_feedboat_dir())
    return _config


def reload_config():
    """Reload config (call after debug mode changes)."""
    global _config
    _config = None


def _log_to_file(line: str):
    """Append line to debug log file."""
    try:
        feedboat_dir = get_feedboat_dir()
        feedboat_dir.mkdir(parents=True, exist_ok=True)
        with open(feedboat_dir / "debug.log", "a") as f:
            f.write(line + "\n")
    except OSError:
        pass


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Args:
        category: Category like 'stack', 'input', 'events', 'render'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    config = _get_config()
    if not config.debug:
        return

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    extras = " ".join(f"{k}={v}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[feedboat:{category}] {timestamp} {message}"
    if extras:
        line += f" | {extras}"

    _log_to_file(line)


def debug_stack(message: str, **kwargs):
    """Log dialog-stack debug message."""
    debug("stack", message, **kwargs)


def debug_input(message: str, **kwargs):
    """Log input-routing debug message."""
    debug("input", message, **kwargs)


def debug_events(message: str, **kwargs):
    """Log event-source debug message."""
    debug("events", message, **kwargs)


def debug_render(message: str, **kwargs):
    """Log rendering debug message."""
    debug("render", message, **kwargs)


def log_error(category: str, message: str, exc: Exception = None):
    """Log error message ALWAYS (even if debug mode is off).

    Args:
        category: Category like 'dashboard', 'events'
        message: Error message
        exc: Optional exception to include traceback
    """
    import traceback

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    line = f"[feedboat:{category}] {timestamp} ERROR: {message}"

    if exc:
        tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
        line += "\n" + "".join(tb)

    _log_to_file(line)
