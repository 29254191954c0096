"""
Common API schemas shared across different endpoints.
"""

from pydantic import BaseModel, ConfigDict
from typing import Optional, Any


class StandardResponse(BaseModel):
    """
    Standard API response format for all endpoints.

    - error_code: 0 = success, 1 = error
    - message: Success or error message
    - data: Response data (optional, only present on success)
    """

    error_code: int = 0
    message: str
    data: Optional[Any] = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "error_code": 0,
                    "message": "Success",
                    "data": {"layer": "controller", "message": "Hello from DemoController"},
                },
                {"error_code": 1, "message": "Unknown layer: foo", "data": None},
            ]
        }
    )


class HealthResponse(BaseModel):
    """Response model for health check (internal use)."""

    status: str
    service: str
    version: str
    wiring_mode: str
    components: int

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "status": "healthy",
                    "service": "IoC Demo",
                    "version": "1.0.0",
                    "wiring_mode": "annotated",
                    "components": 7,
                }
            ]
        }
    )
