from __future__ import annotations

"""Extension registry.

The registry records extensions together with their provenance: the field
descriptor they were read from, or ``None`` for extensions registered
programmatically.

Anything exposing ``register_extension(extension, source)`` can act as a
registration target (see ``ExtensionRegistrar``); ``ExtensionRegistry`` is the
in-memory default.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Protocol, Type, TypeVar

from ..introspection.members import MemberDescriptor

E = TypeVar("E")


class ExtensionRegistrar(Protocol):
    """Protocol for registration targets."""

    def register_extension(self, extension: Any, source: Optional[MemberDescriptor] = None) -> None: ...


@dataclass(frozen=True)
class RegisteredExtension:
    """One registration: the extension and where it came from."""

    extension: Any
    source: Optional[MemberDescriptor]


class ExtensionRegistry:
    """
    In-memory, order-preserving extension registry.

    Registries may be chained: a child registry sees the extensions of its
    parent before its own, while registrations only ever go to the child.

    Notes:
        - Registering the same object twice records it twice.
        - Lookups compare extensions by identity.
    """

    def __init__(self, parent: Optional[ExtensionRegistry] = None) -> None:
        """Initialize an empty registry, optionally chained to ``parent``."""
        self._parent = parent
        self._entries: List[RegisteredExtension] = []

    @property
    def parent(self) -> Optional[ExtensionRegistry]:
        return self._parent

    def register_extension(self, extension: Any, source: Optional[MemberDescriptor] = None) -> None:
        """
        Register an extension.

        Args:
            extension: The extension instance.
            source: The field the extension was read from, if any.
        """
        self._entries.append(RegisteredExtension(extension=extension, source=source))

    def get_local_extensions(self, extension_type: Type[E]) -> List[E]:
        """
        Retrieve extensions registered directly in this registry.

        Args:
            extension_type: Only extensions that are instances of this type are returned.

        Returns:
            The matching extensions in registration order.
        """
        return [entry.extension for entry in self._entries if isinstance(entry.extension, extension_type)]

    def get_extensions(self, extension_type: Type[E]) -> List[E]:
        """
        Retrieve extensions of this registry and all of its ancestors.

        Args:
            extension_type: Only extensions that are instances of this type are returned.

        Returns:
            Ancestor extensions first, then local ones, each in registration order.
        """
        inherited = self._parent.get_extensions(extension_type) if self._parent is not None else []
        return inherited + self.get_local_extensions(extension_type)

    def get_source(self, extension: Any) -> Optional[MemberDescriptor]:
        """
        Look up the provenance of a registered extension.

        Args:
            extension: A previously registered extension.

        Returns:
            The field descriptor it was registered with, or ``None`` if it was
            registered without one or is unknown.
        """
        for entry in self._entries:
            if entry.extension is extension:
                return entry.source
        if self._parent is not None:
            return self._parent.get_source(extension)
        return None

    def __len__(self) -> int:
        return len(self._entries)
