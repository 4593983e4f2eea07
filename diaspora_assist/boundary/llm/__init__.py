"""
Language model boundary layer.

Dependencies: langchain_google_genai
System role: Chat model construction and response helpers
"""

from diaspora_assist.boundary.llm.chat_model import create_chat_model, message_text

__all__ = ["create_chat_model", "message_text"]
