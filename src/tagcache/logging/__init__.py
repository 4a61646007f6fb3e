"""tagcache logging: logging port and its structlog adapter."""

from tagcache.logging.port import LoggingPort
from tagcache.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
