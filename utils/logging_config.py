"""
Logging Configuration

Provides structured logging for the simulation engine:
- Structured output for parsing
- Timing of simulation runs
- Context preservation (country / operation of the current run)
- Environment-based levels (see core.settings)
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Any, Dict, Optional

from core.settings import get_settings


def simulation_context(country: Any, operation: Any) -> Dict[str, str]:
    """
    Build the `extra` mapping that tags log records with the current run.

    Usage:
        logger.info("...", extra=simulation_context("france", "achat"))
    """
    return {'simulation_context': f"{{country={country}, operation={operation}}}"}


class StructuredFormatter(logging.Formatter):
    """
    Structured log formatter for better parsing and debugging.

    Format: [TIMESTAMP] [LEVEL] [MODULE:FUNCTION:LINE] MESSAGE {context}
    """

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, 'simulation_context'):
            record.simulation_context = ''

        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        location = f"{record.module}:{record.funcName}:{record.lineno}"

        base_msg = f"[{timestamp}] [{record.levelname:8s}] [{location}] {record.getMessage()}"

        if record.exc_info:
            base_msg += f"\n{self.formatException(record.exc_info)}"

        if record.simulation_context:
            base_msg += f" {record.simulation_context}"

        return base_msg


class PerformanceLogger:
    """Context manager that times an operation and flags slow ones."""

    def __init__(
        self,
        logger: logging.Logger,
        operation: str,
        threshold_ms: float = 250,
        extra: Optional[Dict[str, Any]] = None
    ):
        self.logger = logger
        self.operation = operation
        self.threshold_ms = threshold_ms
        self.extra = extra
        self.start_time = None
        self.duration_ms: Optional[float] = None

    def __enter__(self):
        self.start_time = datetime.now()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.start_time:
            self.duration_ms = (datetime.now() - self.start_time).total_seconds() * 1000

            if self.duration_ms > self.threshold_ms:
                self.logger.warning(f"SLOW: {self.operation} took {self.duration_ms:.1f}ms", extra=self.extra)
            else:
                self.logger.debug(f"{self.operation} took {self.duration_ms:.1f}ms", extra=self.extra)


def setup_logger(
    name: str,
    level: Optional[str] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up a logger with structured formatting and optional file output.

    Args:
        name: Logger name (usually __name__)
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to LOG_LEVEL or INFO
        log_file: Optional file path for logs. Defaults to LOG_FILE if set

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    settings = get_settings()
    if level is None:
        level = settings.log_level
    if log_file is None:
        log_file = settings.log_file

    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(StructuredFormatter())
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(log_level)
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def get_perf_logger(
    logger: logging.Logger,
    operation: str,
    threshold_ms: Optional[float] = None,
    extra: Optional[Dict[str, Any]] = None
):
    """
    Get a performance logger context manager.

    Usage:
        with get_perf_logger(logger, "run_simulation[france]"):
            result = ...

    Args:
        logger: Logger instance
        operation: Operation name for logging
        threshold_ms: Milliseconds threshold for SLOW warning
            (defaults to SIMULATION_SLOW_THRESHOLD_MS)
        extra: Optional `extra` mapping for the timing record,
            e.g. simulation_context(...)

    Returns:
        PerformanceLogger context manager
    """
    if threshold_ms is None:
        threshold_ms = get_settings().slow_threshold_ms
    return PerformanceLogger(logger, operation, threshold_ms, extra=extra)


def log_table_info(logger: logging.Logger, df, name: str = "Table"):
    """
    Log the shape of a report table.

    Args:
        logger: Logger instance
        df: Pandas DataFrame
        name: Name for the table in logs
    """
    if df is None:
        logger.warning(f"{name} is None")
        return

    if df.empty:
        logger.debug(f"{name} is empty (0 rows)")
    else:
        logger.debug(f"{name}: {len(df)} rows, {len(df.columns)} columns")
