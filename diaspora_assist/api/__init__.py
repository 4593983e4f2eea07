"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import assistant_router

api_router = APIRouter()

# Include all routers
api_router.include_router(assistant_router)

__all__ = ["api_router"]
