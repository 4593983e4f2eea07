"""
File storage boundary layer.

Dependencies: pydantic
System role: Feedback log persistence
"""

from diaspora_assist.boundary.storage.feedback_store import FeedbackStore

__all__ = ["FeedbackStore"]
