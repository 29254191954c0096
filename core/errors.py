"""
Container error hierarchy.
"""

from typing import List, Optional, Sequence


def describe_key(interface: type, qualifier: Optional[str] = None) -> str:
    """Human readable form of a (type, qualifier) registry key."""
    name = getattr(interface, "__name__", repr(interface))
    if qualifier is None:
        return name
    return f"{name}[qualifier='{qualifier}']"


class ContainerError(Exception):
    """Base exception for dependency container errors"""

    def __init__(
        self, interface: type, qualifier: Optional[str] = None, message: str = ""
    ):
        self.interface = interface
        self.qualifier = qualifier
        key = describe_key(interface, qualifier)
        super().__init__(f"{key}: {message}" if message else key)


class NotFoundError(ContainerError):
    """No registered instance matches the requested key"""

    def __init__(self, interface: type, qualifier: Optional[str] = None):
        super().__init__(interface, qualifier, "no matching component registered")


class AmbiguousResolutionError(ContainerError):
    """Several candidates match and no qualifier narrows them to one"""

    def __init__(
        self,
        interface: type,
        qualifier: Optional[str],
        candidates: Sequence[type],
    ):
        self.candidates: List[type] = list(candidates)
        names = ", ".join(c.__name__ for c in self.candidates)
        super().__init__(
            interface,
            qualifier,
            f"expected a single match but found {len(self.candidates)}: {names}",
        )


class RegistrationError(ContainerError):
    """A key was registered twice or the registration is malformed"""

    pass


class CircularDependencyError(ContainerError):
    """A factory depends, directly or not, on the component it is building"""

    def __init__(
        self, interface: type, qualifier: Optional[str], chain: Sequence[str]
    ):
        self.chain: List[str] = list(chain)
        super().__init__(
            interface, qualifier, "circular dependency: " + " -> ".join(self.chain)
        )
