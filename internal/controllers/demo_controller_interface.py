"""
Interface for Demo Controller.
"""

from abc import ABC, abstractmethod


class IDemoController(ABC):
    """Interface for the demo controller layer."""

    @abstractmethod
    def hello(self) -> str:
        pass
