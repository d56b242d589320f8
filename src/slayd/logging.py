"""Logging configuration using loguru.

Provides:
- Human-readable, colorized logging for interactive use
- Structured JSON logging for CI pipelines and log collectors
"""

import json
import sys
from datetime import UTC, datetime

from loguru import logger


def _json_formatter(record: dict) -> str:
    """Format a log record as a single JSON line."""
    log_entry = {
        "timestamp": datetime.now(UTC).isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "logger": record["name"],
        "function": record["function"],
        "line": record["line"],
    }

    if record.get("extra"):
        for key, value in record["extra"].items():
            if key not in log_entry:
                log_entry[key] = value

    if record["exception"]:
        log_entry["exception"] = {
            "type": record["exception"].type.__name__ if record["exception"].type else None,
            "value": str(record["exception"].value) if record["exception"].value else None,
        }

    # Returned as a format string, so braces must be escaped
    return json.dumps(log_entry, default=str).replace("{", "{{").replace("}", "}}") + "\n"


_DEV_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def setup_logging(json_logs: bool = False, log_level: str = "INFO") -> None:
    """Configure loguru for the CLI.

    Logs go to stderr so that stdout stays free for command output.

    Args:
        json_logs: If True, output one JSON object per line
        log_level: Minimum log level to output
    """
    logger.remove()

    if json_logs:
        logger.add(sys.stderr, format=_json_formatter, level=log_level)
    else:
        logger.add(sys.stderr, format=_DEV_FORMAT, level=log_level, colorize=True)


__all__ = ["logger", "setup_logging"]
