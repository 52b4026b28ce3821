"""Services Layer — composes upstream calls into the gateway's responses.

Invariants:
    - Services take the UpstreamClient as an argument (no module-level client)
    - Primary-resource failures propagate as UpstreamError; per-child failures never do
"""
