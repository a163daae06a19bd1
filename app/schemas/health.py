from pydantic import BaseModel, Field


class HealthCheckResponse(BaseModel):
    """Health check response model."""

    version: str = Field(description="API version")
    status: str = Field(description="Overall health status")
    timestamp: str = Field(description="Current timestamp")
    database: str = Field(description="Database connectivity: ok or unavailable")
