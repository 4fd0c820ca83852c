"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger
from time_deposit.config import settings


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


def log_registration(
    request_id: str,
    account_number: str,
    customer_id: int,
    deposit_count: int,
    new_customer: bool,
    duration_ms: float,
) -> None:
    """Log structured registration outcome for analysis"""
    logging.info(
        "Deposit registered",
        extra={
            "request_id": request_id,
            "account_number": account_number,
            "customer_id": customer_id,
            "step": "registration_complete",
            "customer_outcome": "created" if new_customer else "existing",
            "deposit_count": deposit_count,
            "duration_ms": duration_ms,
        },
    )
