"""
Service layer.
Follows Service Layer Pattern and Single Responsibility Principle.
"""

from .demo_service import DemoService

__all__ = [
    "DemoService",
]
