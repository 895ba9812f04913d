"""Centralized logging utilities for JSON-structured logging"""
import json
import logging
import time
import traceback
from typing import Any, Dict


class JSONFormatter(logging.Formatter):
    def format(self, record):
        # If message is already JSON, pass through
        try:
            json.loads(record.getMessage())
            return record.getMessage()
        except (json.JSONDecodeError, ValueError):
            log_data = {
                "timestamp": self.formatTime(record),
                "level": record.levelname,
                "logger": record.name,
                "message": record.getMessage()
            }
            if record.exc_info:
                log_data["exception"] = self.formatException(record.exc_info)
            return json.dumps(log_data)


def configure_logging(level: str = "INFO"):
    """Route all log records through a single JSON stream handler"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[logging.StreamHandler()],
        force=True
    )
    for handler in logging.root.handlers:
        handler.setFormatter(JSONFormatter())

    logging.getLogger("pymongo").setLevel(logging.WARNING)


def _default(value: Any) -> str:
    # ObjectId, datetime and friends
    return str(value)


def log_db_operation(
    logger: logging.Logger,
    operation: str,
    collection: str,
    result_count: int = None,
    expected: bool = True,
    filters: Dict = None
):
    """Log database operations with validation warnings"""
    log_data = {
        "event": "db_operation",
        "operation": operation,
        "collection": collection,
        "result_count": result_count,
        "filters": filters
    }

    if expected and result_count == 0:
        log_data["warning"] = f"Expected data not found in {collection}"
        logger.warning(json.dumps(log_data, default=_default))
    else:
        logger.info(json.dumps(log_data, default=_default))


def log_job_milestone(
    logger: logging.Logger,
    job: str,
    milestone: str,
    details: Dict = None
):
    """Log key steps of a maintenance job"""
    log_data = {
        "event": "job_milestone",
        "job": job,
        "milestone": milestone,
        "details": details or {},
        "timestamp": time.time()
    }
    logger.info(json.dumps(log_data, default=_default))


def log_error_with_context(
    logger: logging.Logger,
    error: Exception,
    error_type: str,
    context: Dict = None
):
    """Enhanced error logging with full context"""
    log_data = {
        "event": "error",
        "error_type": error_type,
        "message": str(error),
        "context": context or {},
        "stack_trace": traceback.format_exc()
    }
    logger.error(json.dumps(log_data, default=_default))
