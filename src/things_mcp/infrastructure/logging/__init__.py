# File: src/things_mcp/infrastructure/logging/__init__.py
# Purpose: Structured logging setup
from things_mcp.infrastructure.logging.formatters import SensitiveDataFilter
from things_mcp.infrastructure.logging.setup import setup_logging

__all__ = [
    "SensitiveDataFilter",
    "setup_logging",
]
