"""
Traveller - a consumer composed with exactly one vehicle.
"""

from core.logger import logger
from core.stereotypes import Dependency, component
from .interfaces import IVehicle


@component(inject={"vehicle": Dependency(IVehicle, "car")})
class Traveller:
    """
    Delegates every journey to the vehicle it was constructed with.
    The vehicle cannot be replaced after construction.
    """

    __slots__ = ("_vehicle",)

    def __init__(self, vehicle: IVehicle):
        if vehicle is None:
            raise ValueError("Traveller requires a vehicle")
        self._vehicle = vehicle

    @property
    def vehicle(self) -> IVehicle:
        return self._vehicle

    def start_journey(self) -> None:
        logger.debug(f"Starting journey with {type(self._vehicle).__name__}")
        self._vehicle.move()
