"""Liveness — static text at / and a JSON probe for container orchestration.

Invariants:
    - Both endpoints answer 200 whenever the process is up; neither calls VTEX
"""

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
async def root():
    return "VTEX API Server is running!"


@router.get("/api/v1/health/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "catalog-gateway"}
