"""
Application layer.

Use-case orchestration over core business logic.
"""
