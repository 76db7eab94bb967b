"""Structured JSON logging."""

import logging
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from dns_check.models.report import Summary


# Run ID for correlation across log entries of one process
RUN_ID = str(uuid.uuid4())


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that adds run_id and standardized fields."""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        """Add custom fields to log record.

        Args:
            log_record: The log record to modify.
            record: The original logging.LogRecord.
            message_dict: Additional fields from the logging call.
        """
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = (
            datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
        )
        log_record["run_id"] = RUN_ID
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure structured JSON logging for the application.

    Logs go to stderr; stdout is reserved for the report.

    Args:
        verbose: Log at DEBUG instead of INFO.

    Returns:
        logging.Logger: Configured root logger.
    """
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    json_handler = logging.StreamHandler(sys.stderr)
    formatter = CustomJsonFormatter(
        "%(message)s",
        timestamp=True,
    )
    json_handler.setFormatter(formatter)
    logger.addHandler(json_handler)

    return logger


def log_run_started(
    servers: int,
    domains: int,
    workers: int,
    timeout: float,
) -> None:
    """Log the start of a test run.

    Args:
        servers: Number of DNS servers under test.
        domains: Number of test domains.
        workers: Worker pool size.
        timeout: Per-query timeout in seconds.
    """
    logger = logging.getLogger(__name__)
    logger.info(
        "Run started",
        extra={
            "servers": servers,
            "domains": domains,
            "total_jobs": servers * domains,
            "workers": workers,
            "timeout_sec": timeout,
        },
    )


def log_run_summary(summary: Summary, duration_sec: float) -> None:
    """Log run completion summary.

    Args:
        summary: Aggregated statistics of the run.
        duration_sec: Total run time in seconds.
    """
    logger = logging.getLogger(__name__)
    logger.info(
        "Run completed",
        extra={
            "total_tests": summary.total_tests,
            "successful_tests": summary.successful_tests,
            "failed_tests": summary.failed_tests,
            "success_rate": summary.success_rate,
            "categories": [c.value for c, _ in summary.ordered_categories()],
            "duration_sec": duration_sec,
        },
    )
