"""
Dependency Injection Container.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, TypeVar

from .config import Settings, get_settings
from .errors import (
    AmbiguousResolutionError,
    CircularDependencyError,
    NotFoundError,
    RegistrationError,
    describe_key,
)
from .logger import logger
from .stereotypes import ComponentDefinition, component_definitions

T = TypeVar("T")

Key = Tuple[type, Optional[str]]

# Packages holding stereotype-decorated application classes
APPLICATION_PACKAGES = ("vehicles", "services", "repositories", "internal.controllers")


@dataclass
class _Entry:
    interface: type
    qualifier: Optional[str]
    stereotype: Optional[str]
    factory: Optional[Callable[[], Any]] = None
    instance: Any = None
    instantiated: bool = False


@dataclass(frozen=True)
class Registration:
    """Read-only view of a registry entry."""

    interface: str
    qualifier: Optional[str]
    stereotype: Optional[str]
    instantiated: bool


class Container:
    """
    Simple Dependency Injection Container.

    Entries are keyed by (type, qualifier). Every entry is a singleton:
    factories run at most once and their product is vended from then on.
    """

    _entries: Dict[Key, _Entry] = {}
    _building: List[Key] = []

    @classmethod
    def _add(cls, entry: _Entry) -> None:
        if not isinstance(entry.interface, type):
            raise RegistrationError(
                entry.interface, entry.qualifier, "interface must be a class"
            )
        key = (entry.interface, entry.qualifier)
        if key in cls._entries:
            raise RegistrationError(
                entry.interface, entry.qualifier, "already registered"
            )
        cls._entries[key] = entry
        logger.debug(
            f"Registered {describe_key(entry.interface, entry.qualifier)}"
            f" ({entry.stereotype or 'bean'})"
        )

    @classmethod
    def register(
        cls,
        interface: Type[T],
        instance: Any,
        qualifier: Optional[str] = None,
        stereotype: Optional[str] = None,
    ) -> None:
        """Register a singleton instance for an interface."""
        if instance is None:
            raise RegistrationError(interface, qualifier, "instance must not be None")
        cls._add(
            _Entry(
                interface=interface,
                qualifier=qualifier,
                stereotype=stereotype,
                instance=instance,
                instantiated=True,
            )
        )

    @classmethod
    def register_factory(
        cls,
        interface: Type[T],
        factory: Callable[[], T],
        qualifier: Optional[str] = None,
        stereotype: Optional[str] = None,
    ) -> None:
        """Register a factory for an interface. The factory runs at most once."""
        if not callable(factory):
            raise RegistrationError(interface, qualifier, "factory must be callable")
        cls._add(
            _Entry(
                interface=interface,
                qualifier=qualifier,
                stereotype=stereotype,
                factory=factory,
            )
        )

    @classmethod
    def register_component(cls, definition: ComponentDefinition) -> None:
        """Register a stereotype-decorated class as a singleton factory."""

        def build():
            kwargs = {
                name: cls.resolve(dependency.interface, dependency.qualifier)
                for name, dependency in definition.dependencies.items()
            }
            return definition.cls(**kwargs)

        cls.register_factory(
            definition.cls,
            build,
            qualifier=definition.qualifier,
            stereotype=definition.stereotype,
        )

    @classmethod
    def _find(cls, interface: type, qualifier: Optional[str]) -> _Entry:
        exact = cls._entries.get((interface, qualifier))
        if exact is not None:
            return exact

        candidates = [
            entry
            for entry in cls._entries.values()
            if _provides(entry.interface, interface)
            and (qualifier is None or entry.qualifier == qualifier)
        ]
        if not candidates:
            raise NotFoundError(interface, qualifier)
        if len(candidates) == 1:
            return candidates[0]
        raise AmbiguousResolutionError(
            interface, qualifier, [entry.interface for entry in candidates]
        )

    @classmethod
    def _instantiate(cls, entry: _Entry) -> Any:
        if entry.instantiated:
            return entry.instance

        key = (entry.interface, entry.qualifier)
        if key in cls._building:
            chain = [describe_key(*k) for k in cls._building[cls._building.index(key):]]
            chain.append(describe_key(*key))
            raise CircularDependencyError(entry.interface, entry.qualifier, chain)

        cls._building.append(key)
        try:
            instance = entry.factory()
        finally:
            cls._building.pop()

        entry.instance = instance
        entry.instantiated = True
        logger.debug(f"Instantiated {describe_key(*key)}")
        return instance

    @classmethod
    def resolve(cls, interface: Type[T], qualifier: Optional[str] = None) -> T:
        """
        Resolve an interface to its implementation.

        Args:
            interface: Requested type; registrations of subclasses match too
            qualifier: Optional tag selecting one of several implementers

        Returns:
            The singleton registered for the matching key

        Raises:
            NotFoundError: Nothing matches
            AmbiguousResolutionError: Several implementers match and the
                qualifier does not narrow them to one
        """
        return cls._instantiate(cls._find(interface, qualifier))

    @classmethod
    def is_registered(cls, interface: type, qualifier: Optional[str] = None) -> bool:
        return (interface, qualifier) in cls._entries

    @classmethod
    def registrations(cls) -> List[Registration]:
        return [
            Registration(
                interface=entry.interface.__name__,
                qualifier=entry.qualifier,
                stereotype=entry.stereotype,
                instantiated=entry.instantiated,
            )
            for entry in cls._entries.values()
        ]

    @classmethod
    def instantiate_all(cls) -> int:
        """Eagerly create every singleton. Returns the number of entries."""
        for entry in list(cls._entries.values()):
            cls._instantiate(entry)
        return len(cls._entries)

    @classmethod
    def clear(cls):
        """Clear all registrations (useful for testing)."""
        cls._entries.clear()
        cls._building.clear()


def _provides(registered: type, requested: type) -> bool:
    if registered is requested:
        return True
    return isinstance(requested, type) and issubclass(registered, requested)


def _register_explicit(settings: Settings) -> None:
    # Configuration-class style: every bean is listed by hand
    from internal.controllers import DemoController
    from repositories import DemoRepository
    from services import DemoService
    from vehicles import Bike, Car, Cycle, IVehicle, Traveller

    Container.register_factory(Car, Car, qualifier="car")
    Container.register_factory(Bike, Bike, qualifier="bike")
    Container.register_factory(Cycle, Cycle, qualifier="cycle")
    Container.register_factory(
        Traveller,
        lambda: Traveller(Container.resolve(IVehicle, settings.traveller_vehicle)),
    )

    Container.register_factory(DemoController, DemoController, stereotype="controller")
    Container.register_factory(DemoService, DemoService, stereotype="service")
    Container.register_factory(DemoRepository, DemoRepository, stereotype="repository")


def _register_annotated() -> None:
    # Importing the packages runs their stereotype decorators
    import internal.controllers  # noqa: F401
    import repositories  # noqa: F401
    import services  # noqa: F401
    import vehicles  # noqa: F401

    for definition in component_definitions(*APPLICATION_PACKAGES):
        Container.register_component(definition)


def bootstrap_container(
    mode: Optional[str] = None, settings: Optional[Settings] = None
) -> int:
    """
    Initialize the dependency injection container.
    Register all dependencies here.

    Args:
        mode: "explicit" or "annotated"; defaults to WIRING_MODE
        settings: Settings to use; defaults to get_settings()

    Returns:
        int: Number of registered components
    """
    settings = settings or get_settings()
    mode = (mode or settings.wiring_mode).lower()

    Container.clear()
    if mode == "explicit":
        _register_explicit(settings)
    elif mode == "annotated":
        _register_annotated()
    else:
        raise ValueError(f"Unknown wiring mode: {mode}")

    count = Container.instantiate_all()
    logger.info(f"DI Container initialized ({mode} wiring, {count} components)")
    return count
