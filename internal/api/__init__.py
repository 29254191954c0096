"""
API Module.
Contains the application factory, routes, schemas, and API-related utilities.
"""

from . import routes
from . import schemas
from .app import create_app

__all__ = [
    "routes",
    "schemas",
    "create_app",
]
