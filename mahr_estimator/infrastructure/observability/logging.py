"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from mahr_estimator.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_estimate(
    request_id: str,
    preference: str,
    mahr_type: str,
    fair: int,
    duration_ms: float,
) -> None:
    """Log structured estimate outcome for analysis"""
    logging.info(
        "Estimate completed",
        extra={
            "request_id": request_id,
            "step": "estimate_complete",
            "preference": preference,
            "mahr_type": mahr_type,
            "fair_amount": fair,
            "duration_ms": duration_ms,
        },
    )


def log_advisory_fallback(reason: str, error: str) -> None:
    """Log that the advisory text fell back to static guidance"""
    logging.warning(
        "Advisory fallback used",
        extra={
            "step": "advisory_fallback",
            "reason": reason,
            "error": error,
        },
    )
