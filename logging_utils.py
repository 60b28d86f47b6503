"""Feature-flagged trace of gameplay events.

Each line reads ``<utc time> <source>.<event> key=value ...`` and is only
written while ``SKYHOP_LOG_ENABLED`` is set.
"""

from datetime import datetime, timezone
from pathlib import Path

from config import LOG_ENABLED, LOG_FILE_PATH

_LOG_PATH = Path(LOG_FILE_PATH)


def format_fields(fields):
    parts = []
    for key, value in fields.items():
        if isinstance(value, float):
            value = f"{value:.1f}"
        elif isinstance(value, str) and (" " in value or not value):
            value = repr(value)
        parts.append(f"{key}={value}")
    return " ".join(parts)


def log_event(source, event, **fields):
    """Append one event line; a no-op unless logging is enabled."""
    if not LOG_ENABLED:
        return
    line = f"{source}.{event}"
    if fields:
        line = f"{line} {format_fields(fields)}"
    stamp = datetime.now(timezone.utc).strftime("%H:%M:%S.%f")[:-3]
    _LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
    with _LOG_PATH.open("a", encoding="utf-8") as log_file:
        print(stamp, line, file=log_file)
