"""API routers."""

from .assistant import router as assistant_router
from .health import router as health_router

__all__ = ["assistant_router", "health_router"]
