"""Response schema for the health endpoint"""
from datetime import datetime
from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness of the API together with reachability of the record store

    Example:
        {
            "status": "Healthy",
            "timestamp": "2025-01-01T00:00:00"
        }
    """
    status: str
    timestamp: datetime
