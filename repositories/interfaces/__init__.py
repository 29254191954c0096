"""
Repository Interfaces.
"""

from .demo_repository_interface import IDemoRepository

__all__ = [
    "IDemoRepository",
]
