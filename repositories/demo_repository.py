"""
Demo repository.
Data access layer stand-in: nothing is persisted, it only identifies itself.
"""

from core.stereotypes import repository
from .interfaces import IDemoRepository


@repository
class DemoRepository(IDemoRepository):
    """Stateless repository-layer component."""

    def hello(self) -> str:
        return "Hello from DemoRepository"
