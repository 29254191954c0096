"""
Interface for Demo Repository.
Defines the contract that all demo repositories must implement.
"""

from abc import ABC, abstractmethod


class IDemoRepository(ABC):
    """Interface for the demo repository layer."""

    @abstractmethod
    def hello(self) -> str:
        """
        Greet from the repository layer.

        Returns:
            str: Greeting identifying the repository
        """
        pass
