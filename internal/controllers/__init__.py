"""
Controllers.
"""

from .demo_controller_interface import IDemoController
from .demo_controller import DemoController

__all__ = [
    "IDemoController",
    "DemoController",
]
