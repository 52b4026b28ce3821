"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every upstream failure is mapped to UpstreamError (core/errors.py)
"""
