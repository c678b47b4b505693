"""
Structured logging configuration.

- Local runs: human-readable colored format
- Deployed branches: JSON format (log aggregator compatible)
- Log level: ``logging.level`` in config.yml
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
    """JSON log formatter for deployed environments."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)
        # Extra fields attached by the certificate pipeline
        for key in ("test_result_id", "system_number", "certificate_kind", "function_name", "attempt"):
            val = getattr(record, key, None)
            if val is not None:
                log_entry[key] = val
        return json.dumps(log_entry, ensure_ascii=False)


class ReadableFormatter(logging.Formatter):
    """Human-readable colored formatter for local runs."""

    COLORS = {
        "DEBUG": "\033[36m",      # cyan
        "INFO": "\033[32m",       # green
        "WARNING": "\033[33m",    # yellow
        "ERROR": "\033[31m",      # red
        "CRITICAL": "\033[35m",   # magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        ts = datetime.now().strftime("%H:%M:%S")
        base = f"{color}{ts} {record.levelname:<8}{self.RESET} {record.name}: {record.getMessage()}"
        if record.exc_info and record.exc_info[0] is not None:
            base += "\n" + self.formatException(record.exc_info)
        return base


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """
    Install a single stderr handler on the root logger.

    ``json_output`` selects JSONFormatter, otherwise ReadableFormatter.
    Calling it again replaces the handler instead of stacking another one.
    """

    resolved = getattr(logging, level.upper(), logging.INFO)
    formatter = JSONFormatter() if json_output else ReadableFormatter()

    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler.setLevel(resolved)
    root.addHandler(handler)
    root.setLevel(resolved)

    # Quieten noisy libraries
    for noisy in ("urllib3", "multipart"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        "Logging configured: level=%s format=%s", level.upper(), "JSON" if json_output else "readable"
    )


__all__ = ["JSONFormatter", "ReadableFormatter", "configure_logging"]
