"""
Anjali Furniture Backend — Health Check Route
===============================================

What:  Liveness probe for the hosting platform and uptime monitors.
How:   Answers from the process alone; it never touches the database, so it
       reports OK even while the store is unreachable.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from app.schemas.payloads import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse, summary="Service liveness check")
async def health_check() -> HealthResponse:
    return HealthResponse(status="OK", timestamp=datetime.now(timezone.utc))
