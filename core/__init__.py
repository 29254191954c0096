"""
Core module containing the container, configuration, errors and logging.
"""

from .config import Settings, get_settings
from .logger import logger
from .errors import (
    AmbiguousResolutionError,
    CircularDependencyError,
    ContainerError,
    NotFoundError,
    RegistrationError,
)
from .container import Container, Registration, bootstrap_container

__all__ = [
    "Settings",
    "get_settings",
    "logger",
    "Container",
    "Registration",
    "bootstrap_container",
    "ContainerError",
    "NotFoundError",
    "AmbiguousResolutionError",
    "RegistrationError",
    "CircularDependencyError",
]
