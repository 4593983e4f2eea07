"""
Application services.

Dependencies: diaspora_assist.core, diaspora_assist.boundary
System role: Use-case orchestration
"""

from diaspora_assist.application.services.assistant_service import AssistantService
from diaspora_assist.application.services.keep_alive_service import KeepAliveService

__all__ = ["AssistantService", "KeepAliveService"]
