from core.logger import logger
from core.stereotypes import component
from .interfaces import IVehicle


@component
class Bike(IVehicle):
    message = "Bike is moving"

    def move(self) -> None:
        logger.debug(f"{type(self).__name__}.move()")
        print(self.message)
