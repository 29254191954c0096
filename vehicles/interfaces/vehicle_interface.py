"""
Interface for Vehicles.
Defines the contract that all vehicles must implement.
"""

from abc import ABC, abstractmethod


class IVehicle(ABC):
    """Interface for anything a traveller can move with."""

    @abstractmethod
    def move(self) -> None:
        """
        Move the vehicle.

        Writes a single line identifying the vehicle to standard output.
        """
        pass
