"""
Schemas for the demo and component endpoints.
"""

from typing import Optional

from pydantic import BaseModel, Field


class GreetingData(BaseModel):
    """Greeting returned by one layer of the demo triad."""

    layer: str = Field(..., description="controller, service or repository")
    component: str = Field(..., description="Class name of the resolved component")
    message: str


class ComponentInfo(BaseModel):
    """One entry of the container registry."""

    interface: str
    qualifier: Optional[str] = None
    stereotype: Optional[str] = None
    instantiated: bool
