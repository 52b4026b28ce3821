"""Route Modules — one file per upstream resource family.

Invariants:
    - Each module defines its own APIRouter with tags
    - Routes never contain aggregation logic (delegate to services)
"""
