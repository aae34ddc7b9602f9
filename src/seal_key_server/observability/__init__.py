"""Observability module for the key server."""

from .health import HealthServer
from .logging import clear_network, configure_logging, get_logger, set_network
from .metrics import NETWORK_INFO, NETWORK_RESOLUTIONS

__all__ = [
    # Health
    "HealthServer",
    # Logging
    "clear_network",
    "configure_logging",
    "get_logger",
    "set_network",
    # Metrics
    "NETWORK_INFO",
    "NETWORK_RESOLUTIONS",
]
