"""Gateway Logging — one JSON line per event, correlated by upstream trace id.

Invariants:
    - Every line has timestamp, level, logger and message
    - Upstream correlation fields (trace_id, route, upstream_status, elapsed_ms)
      and error fields (error_code, path) appear only when set on the record
    - setup_logging installs exactly one gateway handler on the root logger;
      calling it again replaces the previous one
    - httpx's own per-request INFO lines are suppressed; the translator client
      logs each upstream call itself

Design Decisions:
    - Called from the FastAPI lifespan; fmt="text" for local development
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_KEYS = (
    "trace_id", "route", "upstream_status", "elapsed_ms", "error_code", "path",
)
_NOISY_LOGGERS = ("httpx", "httpcore")

_installed_handler: logging.Handler | None = None


class JSONFormatter(logging.Formatter):
    """Render a record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: record.__dict__[key]
            for key in _EXTRA_KEYS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the gateway handler on the root logger and return it."""
    global _installed_handler

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s [%(trace_id)s] - %(message)s",
            defaults={"trace_id": "-"},
        ))

    if _installed_handler is not None:
        logging.root.removeHandler(_installed_handler)
    logging.root.addHandler(handler)
    _installed_handler = handler

    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler
