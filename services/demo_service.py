"""
Demo service.
Stateless service-layer component; it has no collaborators.
"""

from core.stereotypes import service
from .interfaces import IDemoService


@service
class DemoService(IDemoService):
    def hello(self) -> str:
        return "Hello from DemoService"
