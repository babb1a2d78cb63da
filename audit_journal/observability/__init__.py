"""Observability: structured logging.

Provides standardized logging primitives using structlog.
"""

from audit_journal.observability.logging import (
    get_logger,
    setup_logging,
    setup_logging_from_settings,
)

__all__ = ["get_logger", "setup_logging", "setup_logging_from_settings"]
