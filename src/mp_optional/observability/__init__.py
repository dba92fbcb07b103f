"""Observability – structured logging helpers."""
from mp_optional.observability.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
