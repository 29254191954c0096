"""
Service Interfaces.
"""

from .demo_service_interface import IDemoService

__all__ = [
    "IDemoService",
]
