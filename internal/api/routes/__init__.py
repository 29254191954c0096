"""
API Routes.
"""

from .health_routes import create_health_routes
from .demo_routes import create_demo_routes

__all__ = [
    "create_health_routes",
    "create_demo_routes",
]
