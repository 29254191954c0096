"""
Stereotype decorators.

Marking a class with ``@component``, ``@controller``, ``@service`` or
``@repository`` records a ``ComponentDefinition`` for it. Nothing is
instantiated here: the container turns definitions into singleton factories
when the application bootstraps (see ``Container.register_component``).

Constructor dependencies are declared explicitly through ``inject``::

    @component(inject={"vehicle": Dependency(IVehicle, "car")})
    class Traveller:
        def __init__(self, vehicle): ...
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Type, TypeVar, Union

from .errors import RegistrationError

T = TypeVar("T")

COMPONENT_ATTR = "__component_definition__"


@dataclass(frozen=True)
class Dependency:
    """A constructor dependency resolved from the container."""

    interface: type
    qualifier: Optional[str] = None


@dataclass(frozen=True)
class ComponentDefinition:
    cls: type
    qualifier: Optional[str] = None
    stereotype: str = "component"
    dependencies: Dict[str, Dependency] = field(default_factory=dict)


_definitions: List[ComponentDefinition] = []


def _stereotype(stereotype: str):
    def decorator_factory(
        cls: Optional[Type[T]] = None,
        *,
        qualifier: Optional[str] = None,
        inject: Optional[Dict[str, Dependency]] = None,
    ) -> Union[Type[T], Callable[[Type[T]], Type[T]]]:
        def decorate(target: Type[T]) -> Type[T]:
            # vars() so a decorated base class does not mark its subclasses
            if COMPONENT_ATTR in vars(target):
                raise RegistrationError(
                    target, qualifier, "class is already declared as a component"
                )
            definition = ComponentDefinition(
                cls=target,
                qualifier=qualifier,
                stereotype=stereotype,
                dependencies=dict(inject or {}),
            )
            setattr(target, COMPONENT_ATTR, definition)
            _definitions.append(definition)
            return target

        if cls is not None:
            return decorate(cls)
        return decorate

    decorator_factory.__name__ = stereotype
    decorator_factory.__doc__ = f"Declare a class as a {stereotype} managed by the container."
    return decorator_factory


component = _stereotype("component")
controller = _stereotype("controller")
service = _stereotype("service")
repository = _stereotype("repository")


def get_definition(cls: type) -> Optional[ComponentDefinition]:
    return vars(cls).get(COMPONENT_ATTR)


def component_definitions(*packages: str) -> List[ComponentDefinition]:
    """
    Get the definitions declared inside the given packages.

    Args:
        packages: Package names; a class matches when its module is the
            package itself or one of its submodules. No packages means all.

    Returns:
        List[ComponentDefinition]: Matching definitions in declaration order
    """
    if not packages:
        return list(_definitions)

    def in_packages(module: str) -> bool:
        return any(
            module == package or module.startswith(package + ".")
            for package in packages
        )

    return [d for d in _definitions if in_packages(d.cls.__module__)]
