"""Route Helpers — input checks and failure wording shared by every router.

Invariants:
    - require_param() rejects None, empty and whitespace-only values with 400
    - require_path_id() treats a trailing slash as route syntax, not part of the id
    - describe_failure() only rewords UpstreamError; every other exception passes untouched
"""

from contextlib import contextmanager

from catalog_gateway.core.errors import MissingParameterError, UpstreamError


def require_param(value: str | None, message: str, field: str) -> str:
    """Return value unchanged, or raise MissingParameterError if blank."""
    if value is None or not value.strip():
        raise MissingParameterError(message, field)
    return value


@contextmanager
def describe_failure(public_message: str):
    """Attach the route's generic 500 text to any UpstreamError raised inside."""
    try:
        yield
    except UpstreamError as e:
        e.describe_as(public_message)
        raise


def require_path_id(value: str | None, message: str, field: str) -> str:
    """Path-converter id with one trailing slash dropped (/sku/42/ → "42")."""
    if value is not None and value.endswith("/"):
        value = value[:-1]
    return require_param(value, message, field)
