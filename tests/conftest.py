import pytest

from core import Container
from core.config import get_settings


@pytest.fixture(autouse=True)
def clean_container():
    """Every test starts and ends with an empty registry."""
    Container.clear()
    get_settings.cache_clear()
    yield
    Container.clear()
    get_settings.cache_clear()
