"""Observability module for structured logging."""

from .logging import (
    RunContextManager,
    cluster_var,
    get_logger,
    log_external_call_end,
    log_external_call_start,
    service_name_var,
    setup_logging,
)

__all__ = [
    # Setup
    "setup_logging",
    "get_logger",
    # Context
    "RunContextManager",
    "service_name_var",
    "cluster_var",
    # Logging helpers
    "log_external_call_start",
    "log_external_call_end",
]
