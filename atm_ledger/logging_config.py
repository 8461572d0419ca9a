"""
Structured logging configuration.

Every module logs through logging.getLogger(__name__), which
places it under the "atm_ledger" logger configured here.
"""

import json
import logging
from datetime import datetime, timezone

LOGGER_NAME = "atm_ledger"


class JSONFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "account_number": getattr(record, "account_number", None),
            "action": getattr(record, "action", None),
        }

        # Drop fields the record didn't carry
        log_entry = {k: v for k, v in log_entry.items() if v is not None}

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a JSON stream handler to the application logger.

    Safe to call more than once: existing handlers are replaced
    rather than duplicated.
    """
    logger = logging.getLogger(LOGGER_NAME)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False

    return logger
