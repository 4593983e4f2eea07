"""
Diaspora Assist.

Multilingual immigration-assistance backend: retrieval-augmented answers
with intent routing, translation, transcription and answer evaluation.
"""

__version__ = "0.1.0"
