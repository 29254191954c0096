"""
Interface for Demo Service.
Defines the contract that all demo services must implement.
"""

from abc import ABC, abstractmethod


class IDemoService(ABC):
    """Interface for the demo service layer."""

    @abstractmethod
    def hello(self) -> str:
        """
        Greet from the service layer.

        Returns:
            str: Greeting identifying the service
        """
        pass
