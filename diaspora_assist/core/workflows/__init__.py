"""
Question workflows: intent classification and routing.
"""

from diaspora_assist.core.workflows.intent_classifier import IntentClassifier
from diaspora_assist.core.workflows.router import WorkflowRouter

__all__ = ["IntentClassifier", "WorkflowRouter"]
