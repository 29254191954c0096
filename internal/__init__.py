"""
Internal package.
Contains controllers, command-line clients, the HTTP API and other internal modules.
"""

from . import controllers

__all__ = [
    "controllers",
]
