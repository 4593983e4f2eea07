"""
Observability module.

Provides structured logging, correlation ID tracking and request logging.
"""

from diaspora_assist.observability.logger import configure_logging
from diaspora_assist.observability.log_utils import log_degraded, log_with_context

__all__ = ["configure_logging", "log_degraded", "log_with_context"]
