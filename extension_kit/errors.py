"""Error types for the extension registration package.

Defines a small hierarchy of exceptions raised while discovering and
registering extension fields. Unreadable field values are deliberately not
part of this hierarchy: they are skipped, not reported.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .introspection.members import MemberDescriptor


class ExtensionKitError(Exception):
    """Base error for all extension registration exceptions."""


class InvalidInvocationError(ExtensionKitError, ValueError):
    """Raised when a registration pass is requested with unusable arguments."""


class FieldScanError(ExtensionKitError):
    """Raised when the annotations of a class cannot be resolved.

    Args:
        owner_type: The class whose annotations failed to resolve.
        reason: Human-readable description of the underlying failure.
    """

    def __init__(self, owner_type: Any, reason: str) -> None:
        name = getattr(owner_type, "__qualname__", repr(owner_type))
        super().__init__(f"Cannot resolve field annotations of '{name}': {reason}")
        self.owner_type = owner_type


class CapabilityMismatchError(ExtensionKitError, TypeError):
    """Raised when a field value does not satisfy the required capability type.

    A field only reaches value reading after its declared type was checked, so
    this signals a field holding a value of a different type than it declares.

    Args:
        member: Descriptor of the offending field.
        owner_type: The class that was being scanned.
        capability_type: The type every registered value must satisfy.
        value: The value actually read from the field.
    """

    def __init__(self, member: MemberDescriptor, owner_type: type, capability_type: type, value: Any) -> None:
        self.member = member
        self.owner_type = owner_type
        self.capability_type = capability_type
        self.value_type = type(value)
        super().__init__(
            f"Field '{member.qualified_name}' scanned from '{owner_type.__qualname__}' holds a value of type "
            f"'{self.value_type.__qualname__}' which is not a '{capability_type.__qualname__}'"
        )
