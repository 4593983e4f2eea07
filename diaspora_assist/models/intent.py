"""
Intent domain model.

Closed label set for question classification.

Dependencies: enum (stdlib)
System role: Intent routing vocabulary
"""

import enum


class Intent(str, enum.Enum):
    """Coarse classification label for a user question."""

    VISA_ELIGIBILITY = "visa_eligibility"
    DOCUMENT_REQUIREMENTS = "document_requirements"
    GENERAL_INFO = "general_info"

    @classmethod
    def default(cls) -> "Intent":
        """Label used when classification fails or is ambiguous."""
        return cls.GENERAL_INFO
