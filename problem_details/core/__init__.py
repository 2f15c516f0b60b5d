"""Core shared kernel.

This module provides foundational pieces used across all layers:
- Settings (pydantic-settings)
- Error types raised or consumed by the problem machinery
- Serialization and content negotiation for problem documents
- Logger factory (composition root for logging)

Apart from the lazy adapter import in the logger factory, core has NO
dependencies on other package layers.
"""
