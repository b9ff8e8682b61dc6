"""
Monitoring infrastructure for mutstd.
"""
from mutstd.infrastructure.monitoring.logger import (
    JSONFormatter,
    configure_logging,
    get_logger,
    log_performance,
    set_load_id,
    setup_logging,
)

__all__ = [
    "JSONFormatter",
    "configure_logging",
    "get_logger",
    "log_performance",
    "set_load_id",
    "setup_logging",
]
