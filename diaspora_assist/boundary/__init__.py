"""
Boundary layer.

Adapters for external systems: vector indexes, the hosted language model and
the feedback file.
"""
