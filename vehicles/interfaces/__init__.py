"""
Vehicle Interfaces.
"""

from .vehicle_interface import IVehicle

__all__ = [
    "IVehicle",
]
