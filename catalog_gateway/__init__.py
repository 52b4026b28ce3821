"""Catalog Gateway — REST facade over the VTEX catalog and checkout APIs.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
