"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Successful responses are JSON; validation and failure paths are plain text

Design Decisions:
    - Thin routes delegate to services
"""
