"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

SERVICE_NAME = "loan-gateway"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = SERVICE_NAME


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


def mask_personal_code(personal_code: str) -> str:
    """Hide the last four digits so logs never carry a full identity code"""
    if len(personal_code) <= 4:
        return "*" * len(personal_code)
    return personal_code[:-4] + "****"


def log_decision(
    request_id: str,
    personal_code: str,
    outcome: str,
    requested_amount: int,
    requested_period: int,
    approved_amount: Optional[int],
    approved_period: Optional[int],
    duration_ms: float,
) -> None:
    """Log structured decision outcome for analysis"""
    logging.info(
        "Decision completed",
        extra={
            "request_id": request_id,
            "personal_code": mask_personal_code(personal_code),
            "step": "decision_complete",
            "outcome": outcome,
            "requested_amount": requested_amount,
            "requested_period": requested_period,
            "approved_amount": approved_amount,
            "approved_period": approved_period,
            "duration_ms": duration_ms,
        },
    )
