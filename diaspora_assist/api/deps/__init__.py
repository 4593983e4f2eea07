"""FastAPI dependency factories."""

from diaspora_assist.api.deps.dependencies import (
    ServiceCache,
    get_assistant_service,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "ServiceCache",
    "get_assistant_service",
    "get_service_cache",
    "get_settings_dependency",
]
