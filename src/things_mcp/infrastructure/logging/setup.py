# File: src/things_mcp/infrastructure/logging/setup.py
# Purpose: Structured JSON logging to stderr with optional rotating log files
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import structlog
from pythonjsonlogger import jsonlogger

from things_mcp.infrastructure.logging.formatters import redact_sensitive


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[str] = None,
    app_name: str = "things_mcp"
) -> structlog.BoundLogger:
    """
    Setup structured logging for the stdio server.

    stdout is reserved for MCP framing, so the console handler writes to
    stderr. When ``log_dir`` is given, logs are also written to a daily
    rotated application log and a size-rotated error log.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory to store log files, or None/"" for stderr only
        app_name: Application name for logger identification

    Returns:
        Configured structlog logger instance
    """
    level = log_level.upper()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            redact_sensitive,
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    json_formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(name)s %(levelname)s %(message)s",
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger"
        }
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(json_formatter)
    console_handler.setLevel(logging.DEBUG)
    root_logger.addHandler(console_handler)

    handlers = ["stderr"]
    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        # Application logs (rotated daily, keep 30 days)
        app_handler = logging.handlers.TimedRotatingFileHandler(
            filename=log_path / f"{app_name}.log",
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8"
        )
        app_handler.setFormatter(json_formatter)
        app_handler.setLevel(logging.INFO)
        app_handler.suffix = "%Y-%m-%d"
        root_logger.addHandler(app_handler)

        # Error logs (rotated by size, keep 10 files)
        error_handler = logging.handlers.RotatingFileHandler(
            filename=log_path / f"{app_name}_error.log",
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=10,
            encoding="utf-8"
        )
        error_handler.setFormatter(json_formatter)
        error_handler.setLevel(logging.ERROR)
        root_logger.addHandler(error_handler)
        handlers += ["app_file", "error_file"]

    logger = structlog.get_logger(app_name)
    logger.info(
        "logging_initialized",
        log_level=level,
        log_dir=log_dir or None,
        handlers=handlers
    )

    return logger