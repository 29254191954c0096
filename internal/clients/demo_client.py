"""
Demo client.
Resolves each layer of the controller/service/repository triad
independently and prints its greeting.
"""

import sys
from typing import List, Optional

from core import Container
from internal.controllers import DemoController
from repositories import DemoRepository
from services import DemoService
from .common import build_parser, run_client


def run() -> None:
    demo_controller = Container.resolve(DemoController)
    print(demo_controller.hello())
    demo_repository = Container.resolve(DemoRepository)
    print(demo_repository.hello())
    demo_service = Container.resolve(DemoService)
    print(demo_service.hello())


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser("ioc-demo", "Greet from each stereotype layer.")
    return run_client(parser, run, argv)


if __name__ == "__main__":
    sys.exit(main())
