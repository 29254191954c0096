"""
Demo controller.
Entry layer of the controller/service/repository triad.
"""

from core.stereotypes import controller
from .demo_controller_interface import IDemoController


@controller
class DemoController(IDemoController):
    def hello(self) -> str:
        return "Hello from DemoController"
