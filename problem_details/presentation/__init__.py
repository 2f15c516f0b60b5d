"""Presentation layer - FastAPI/Starlette integration.

Negotiates the response format per request, runs the observation hook,
and turns problem documents into HTTP responses. Contains NO construction
rules of its own; those live in the application layer.
"""
