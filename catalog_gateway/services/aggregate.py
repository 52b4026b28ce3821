"""Fan-Out Aggregator — fetch one detail resource per child concurrently and merge.

Invariants:
    - len(result) == len(children), order preserved
    - UpstreamError on a single child becomes a placeholder merge, never escalates
    - Children without a reference id get the placeholder without an upstream call
    - Non-object children pass through unchanged
    - No concurrency limit: every fetch is started before any is awaited

Design Decisions:
    - Caller supplies fetch_detail(ref): the aggregator never builds URLs
    - Only UpstreamError is absorbed; programming errors still fail the request
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from catalog_gateway.core.domain_types import JSONValue
from catalog_gateway.core.errors import UpstreamError
from catalog_gateway.core.merge import merge_detail, merge_failure, reference_of

logger = logging.getLogger(__name__)

FetchDetail = Callable[[Any], Awaitable[JSONValue]]


async def aggregate(
    children: list,
    fetch_detail: FetchDetail,
    *,
    reference_key: str,
    merge_key: str,
    fallback: Any = None,
    error_flag: str | None = None,
) -> list:
    """Merge each child's detail resource under merge_key.

    Args:
        children: child entries of the parent resource.
        fetch_detail: coroutine function mapping a reference id to its detail JSON.
        reference_key: key holding the reference id on each child.
        merge_key: key the detail (or fallback) is stored under.
        fallback: value stored when the fetch fails or the reference is missing.
        error_flag: when set, failed children also get this key with an error message.
    """

    async def fetch_and_merge(child):
        if not isinstance(child, dict):
            return child
        ref = reference_of(child, reference_key)
        if ref is None:
            logger.warning(
                f"Child has no '{reference_key}', skipping detail fetch",
                extra={"merge_key": merge_key},
            )
            return merge_failure(child, merge_key, fallback, error_flag)
        try:
            detail = await fetch_detail(ref)
        except UpstreamError as e:
            logger.warning(
                f"Detail fetch failed for {reference_key}={ref}: {e.message}",
                extra={
                    "reference": str(ref),
                    "merge_key": merge_key,
                    "upstream_status": e.status_code,
                },
            )
            return merge_failure(child, merge_key, fallback, error_flag)
        return merge_detail(child, merge_key, detail)

    return list(await asyncio.gather(*(fetch_and_merge(c) for c in children)))
