"""
Traveller client.
Resolves every vehicle by its concrete type, moves each one, then sends the
traveller on a journey with the vehicle the container injected.
"""

import sys
from typing import List, Optional

from core import Container
from vehicles import Bike, Car, Cycle, Traveller
from .common import build_parser, run_client


def run() -> None:
    car = Container.resolve(Car)
    car.move()

    bike = Container.resolve(Bike)
    bike.move()

    cycle = Container.resolve(Cycle)
    cycle.move()

    traveller = Container.resolve(Traveller)
    traveller.start_journey()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser("ioc-traveller", "Move every vehicle, then travel.")
    return run_client(parser, run, argv)


if __name__ == "__main__":
    sys.exit(main())
