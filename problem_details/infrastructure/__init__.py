"""Infrastructure layer - Adapters.

Implementations of domain protocols. Currently the structlog-backed logger.
"""
