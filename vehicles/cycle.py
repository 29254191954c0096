"""
Cycle vehicle.
"""

from core.logger import logger
from core.stereotypes import component
from .interfaces import IVehicle


@component
class Cycle(IVehicle):
    """Stateless cycle."""

    message = "Cycle is moving"

    def move(self) -> None:
        logger.debug(f"{type(self).__name__}.move()")
        print(self.message)
