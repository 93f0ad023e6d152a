"""Diagnostics and SIEM-compatible security event logging.

report() is the diagnostic sink used by the breach checking engine. It
goes through the standard logging module so the embedding application
decides where messages end up.

log_siem_event() writes structured JSON events for breach hits and lookup
failures, suitable for Splunk, ELK or QRadar ingestion. It is disabled
unless SIEM_LOGGING_ENABLED is set, and uses a rotating file handler to
prevent disk exhaustion.
"""

import json
import logging
import os
from datetime import datetime
from logging.handlers import RotatingFileHandler
from threading import Lock
from typing import Callable, Optional

from breachcheck import config


logger = logging.getLogger("breachcheck")

# Signature of an injectable diagnostic sink: (message, level) -> None
Reporter = Callable[[str, int], None]

MESSAGE_PREFIX = "password_breach_check reported: "

_siem_logger = logging.getLogger("breachcheck.siem.events")
_siem_logger.propagate = False
_siem_lock = Lock()


def report(message: str, level: int = logging.ERROR) -> None:
    """Emit an engine diagnostic.

    Args:
        message: Human readable description. Must never contain the
            password or its full digest.
        level: logging level (ERROR, WARNING, ...)
    """
    logger.log(level, "%s%s", MESSAGE_PREFIX, message)


def _siem_handler(path: str) -> logging.Handler:
    """Get the rotating handler for path, replacing a stale one."""
    with _siem_lock:
        for handler in list(_siem_logger.handlers):
            if getattr(handler, "baseFilename", None) == os.path.abspath(path):
                return handler
            _siem_logger.removeHandler(handler)
            handler.close()

        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, mode=0o700, exist_ok=True)

        handler = RotatingFileHandler(
            path,
            maxBytes=config.SIEM_LOG_MAX_BYTES,
            backupCount=config.SIEM_LOG_BACKUP_COUNT,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        _siem_logger.addHandler(handler)
        _siem_logger.setLevel(logging.INFO)
        return handler


def log_siem_event(
    event_type: str,
    status: str,
    details: Optional[dict] = None,
) -> None:
    """Log event in JSON format suitable for SIEM tools.

    Args:
        event_type: Type of event (e.g. 'breach_detected', 'lookup_failed')
        status: Event status (e.g. 'BREACHED', 'CLEAN', 'UNKNOWN')
        details: Optional additional event details
    """
    if not config.SIEM_LOGGING_ENABLED:
        return

    event = {
        "timestamp": datetime.now().isoformat(),
        "event_type": event_type,
        "status": status,
        "source": "password_breach_check",
    }

    if details:
        event["details"] = details

    # Don't fail the check if the event log is unwritable
    try:
        handler = _siem_handler(config.SIEM_LOG_FILE)
        _siem_logger.info(json.dumps(event))
        handler.flush()
    except OSError as e:
        report(f"Could not write SIEM event: {e}", logging.ERROR)


def close_siem_log() -> None:
    """Detach and close the SIEM file handler."""
    with _siem_lock:
        for handler in list(_siem_logger.handlers):
            _siem_logger.removeHandler(handler)
            handler.close()


def get_siem_events(limit: int = 100) -> list[dict]:
    """Read and parse SIEM log events.

    Args:
        limit: Maximum number of events to return

    Returns:
        List of parsed event dictionaries, oldest first
    """
    if not os.path.exists(config.SIEM_LOG_FILE):
        return []

    events = []
    with open(config.SIEM_LOG_FILE, "r") as f:
        for line in f:
            try:
                events.append(json.loads(line))
            except json.JSONDecodeError:
                continue

    return events[-limit:]
