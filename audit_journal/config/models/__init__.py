"""Configuration section models."""

from audit_journal.config.models.journal import JournalConfig
from audit_journal.config.models.observability import LoggingConfig, ObservabilityConfig

__all__ = ["JournalConfig", "LoggingConfig", "ObservabilityConfig"]
