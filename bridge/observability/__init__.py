"""Observability: logging and metrics for the bridge."""

from bridge.observability.logger import configure_logging, get_logger
from bridge.observability.metrics import Metrics

__all__ = ["configure_logging", "get_logger", "Metrics"]
