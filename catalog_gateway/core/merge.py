"""Detail Merge — pure helpers for attaching fetched detail resources to children.

Invariants:
    - Inputs are never mutated: every merge returns a new dict
    - children_of() never raises on an unexpected parent shape, it returns []
    - A merged child keeps every original key; only merge_key (and the error flag) change
"""

import copy
from typing import Any

SKU_DETAILS_ERROR = "Failed to fetch SKU details"


def children_of(parent: Any, key: str | None = None) -> list:
    """Child collection of a parent resource.

    With key=None the parent itself must be the list (e.g. search results).
    """
    if key is None:
        return list(parent) if isinstance(parent, list) else []
    if not isinstance(parent, dict):
        return []
    children = parent.get(key)
    return list(children) if isinstance(children, list) else []


def reference_of(child: Any, key: str) -> Any:
    """Identifier a child uses to locate its detail resource, or None."""
    if not isinstance(child, dict):
        return None
    ref = child.get(key)
    if ref is None or (isinstance(ref, str) and not ref.strip()):
        return None
    return ref


def merge_detail(child: dict, merge_key: str, detail: Any) -> dict:
    return {**child, merge_key: detail}


def merge_failure(
    child: dict, merge_key: str, fallback: Any = None,
    error_flag: str | None = None, error_message: str = SKU_DETAILS_ERROR,
) -> dict:
    """Placeholder merge for a child whose detail fetch failed."""
    merged = {**child, merge_key: copy.deepcopy(fallback)}
    if error_flag:
        merged[error_flag] = error_message
    return merged


def with_collection(parent: Any, key: str, children: list) -> dict:
    """Parent object with its child collection replaced by the merged one."""
    base = parent if isinstance(parent, dict) else {}
    return {**base, key: children}
