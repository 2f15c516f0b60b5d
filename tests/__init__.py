"""Test suite for problem_details.

Test structure:
- unit/: Status metadata, document model, registry, builder, negotiation,
  serialization, settings and logging in isolation
- integration/: Requests through a FastAPI app with the responder installed
"""
