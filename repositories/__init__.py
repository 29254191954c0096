"""
Repository layer for data access.
Implements Repository Pattern and follows Single Responsibility Principle.
"""

from .demo_repository import DemoRepository

__all__ = [
    "DemoRepository",
]
