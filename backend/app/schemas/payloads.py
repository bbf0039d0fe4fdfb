"""
Anjali Furniture Backend — Request Payload and Health Schemas
===============================================================

Most request bodies are forwarded to the store untouched as
`Dict[str, Any]`; only the status update and the health probe have a
fixed shape.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class StatusUpdate(BaseModel):
    """
    Body of PATCH /api/requests/{id}.

    Only `status` is applied; any other keys in the body are ignored.
    """
    status: str = Field(description="New request status, e.g. 'approved'")

    model_config = ConfigDict(extra="ignore")


class HealthResponse(BaseModel):
    """Liveness probe body. Never depends on the database."""
    status: str = Field(default="OK")
    timestamp: datetime = Field(description="Current server time (UTC)")
