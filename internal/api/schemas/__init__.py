"""
API Schemas (Request/Response Models).
"""

from .common_schemas import (
    StandardResponse,
    HealthResponse,
)
from .demo_schemas import (
    GreetingData,
    ComponentInfo,
)

__all__ = [
    # Common schemas
    "StandardResponse",
    "HealthResponse",
    # Demo schemas
    "GreetingData",
    "ComponentInfo",
]
