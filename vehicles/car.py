"""
Car vehicle.
"""

from core.logger import logger
from core.stereotypes import component
from .interfaces import IVehicle


@component(qualifier="car")
class Car(IVehicle):
    """Stateless car."""

    message = "Car is moving"

    def move(self) -> None:
        logger.debug(f"{type(self).__name__}.move()")
        print(self.message)
