"""Root logging for the task board; every line carries the task id and operation."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s task=%(task_id)s op=%(op)s %(message)s"

# Extras the service attaches to its records; filled for everyone else.
_EXTRA_DEFAULTS = {"task_id": "-", "op": "-"}


class SafeFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        for key, default in _EXTRA_DEFAULTS.items():
            record.__dict__.setdefault(key, default)
        return super().format(record)


def _resolve_level(level_name: str) -> int:
    level = logging.getLevelName((level_name or "").upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level_name: str) -> None:
    """Install the task board handler on the root logger once and apply ``level_name``."""

    root = logging.getLogger()
    if not any(isinstance(h.formatter, SafeFormatter) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(SafeFormatter(LOG_FORMAT))
        root.addHandler(handler)

    level = _resolve_level(level_name)
    root.setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(level)
