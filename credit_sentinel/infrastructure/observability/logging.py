"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List
from pythonjsonlogger import jsonlogger

from credit_sentinel.config import settings


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


def log_risk_profile(
    loan_id: str,
    operation: str,
    score: int,
    level: str,
    rule_ids: List[str],
    duration_ms: float,
) -> None:
    """Log structured risk computation outcome for audit"""
    logging.getLogger("credit_sentinel.risk").info(
        "Risk profile computed",
        extra={
            "loan_id": loan_id,
            "step": "risk_profile",
            "operation": operation,
            "score": score,
            "risk_level": level,
            "rule_ids": rule_ids,
            "duration_ms": duration_ms,
        },
    )
