"""
Structured logging helpers.

log_with_context flattens arbitrary values into short strings before they
reach the ``extra`` dict, and log_degraded is the single entry point for
every fail-open path (translation, transcription, generation, intent,
evaluation, pipeline).

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

MAX_VALUE_LENGTH = 500


def safe_log_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """
    Render a value for a log field.

    Collections are summarised by size; long strings are truncated.

    Args:
        value: Value to render
        max_length: Longest string kept before truncation

    Returns:
        str: Printable value
    """
    if isinstance(value, (list, tuple, set)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"

    text = value if isinstance(value, str) else str(value)
    if len(text) > max_length:
        return f"{text[:max_length]}... (truncated, {len(text)} total)"
    return text


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log a message with structured fields.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Field values, rendered with safe_log_value
    """
    logger.log(
        level,
        message,
        extra={key: safe_log_value(val) for key, val in context.items()},
    )


def log_degraded(
    logger: logging.Logger,
    component: str,
    fallback: str,
    exc: Exception | None = None,
    **context,
) -> None:
    """
    Record that a component returned its fallback value instead of a real result.

    Degraded responses carry ``degraded=True`` and the component name so they
    can be told apart from fully processed ones.

    Args:
        logger: Logger instance
        component: Component that degraded (e.g. "translator")
        fallback: Short description of the value returned instead
        exc: Exception that triggered the fallback, if any
        **context: Additional fields
    """
    if exc is not None:
        context["error_type"] = type(exc).__name__
        context["error_msg"] = str(exc)
    log_with_context(
        logger,
        logging.WARNING,
        f"{component} degraded: returning {fallback}",
        degraded=True,
        component=component,
        fallback=fallback,
        **context,
    )
