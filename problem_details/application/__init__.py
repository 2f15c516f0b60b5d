"""Application layer - Problem construction.

Turns explicit caller fields or caught exceptions into problem documents,
applying configured defaults, registered types and production policy.
"""
