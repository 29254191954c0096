"""
Vehicles: the capability interface, its interchangeable variants and the
traveller composed with one of them.
"""

from .interfaces import IVehicle
from .car import Car
from .bike import Bike
from .cycle import Cycle
from .traveller import Traveller

__all__ = [
    "IVehicle",
    "Car",
    "Bike",
    "Cycle",
    "Traveller",
]
