"""Utilities for registering extensions declared as class fields."""

from __future__ import annotations

import inspect
from typing import Any, Optional

from ..core.logging_config import get_logger
from ..errors import CapabilityMismatchError, InvalidInvocationError
from ..introspection.members import MemberDescriptor
from ..introspection.reader import read_field_value
from ..introspection.scanner import find_annotated_fields
from .base import Extension, RegisterExtension
from .eligibility import extension_field_predicate
from .registry import ExtensionRegistrar

logger = get_logger(__name__)


def _validate_invocation(owner_type: Any, registry: Any, instance: Any) -> None:
    if owner_type is None:
        raise InvalidInvocationError("owner_type must not be None")
    if not inspect.isclass(owner_type):
        raise InvalidInvocationError(f"owner_type must be a class, got {owner_type!r}")
    if registry is None:
        raise InvalidInvocationError("registry must not be None")
    if instance is not None and not isinstance(instance, owner_type):
        raise InvalidInvocationError(
            f"instance of '{type(instance).__qualname__}' is not an instance of '{owner_type.__qualname__}'"
        )


def _checked_cast(value: Any, member: MemberDescriptor, owner_type: type, capability_type: type) -> Any:
    if not isinstance(value, capability_type):
        error = CapabilityMismatchError(member, owner_type, capability_type, value)
        logger.error(str(error))
        raise error
    return value


def register_extensions_from_fields(
    owner_type: type,
    registry: ExtensionRegistrar,
    instance: Optional[Any] = None,
    *,
    capability_type: type = Extension,
) -> None:
    """
    Register extensions from the ``RegisterExtension`` fields of a class.

    Without ``instance`` only static (``ClassVar``) fields are considered and
    read from the class; with ``instance`` only instance fields are considered
    and read from that instance. Fields must be public and declared with a type
    satisfying ``capability_type``.

    Static fields are read from the class that declares them, not through
    ``owner_type``: a subclass that only reassigns an inherited static field
    (``Sub.field = other``) still registers the declaring class's value.
    Redeclare the annotation on the subclass to register its own value.

    Unlike an unreadable field, which is skipped, an ``instance`` of an
    unrelated class is rejected up front instead of silently registering
    nothing.

    Args:
        owner_type: The class in which to search for fields.
        registry: The registry in which to register the extensions.
        instance: An instance of ``owner_type``; ``None`` when searching for
            static fields.
        capability_type: The type every registered value must satisfy.

    Raises:
        InvalidInvocationError: If ``owner_type`` or ``registry`` is missing, or
            ``instance`` is not an instance of ``owner_type``.
        CapabilityMismatchError: If a qualifying field holds a value that does
            not satisfy ``capability_type``.
    """
    _validate_invocation(owner_type, registry, instance)

    static = instance is None
    predicate = extension_field_predicate(static, capability_type)
    logger.debug("Scanning %s fields of %s", "static" if static else "instance", owner_type.__qualname__)

    for member in find_annotated_fields(owner_type, RegisterExtension, predicate):
        value = read_field_value(member, instance)
        if value is None:
            logger.debug("Skipping %s: no readable value", member)
            continue
        extension = _checked_cast(value, member, owner_type, capability_type)
        registry.register_extension(extension, member)
        logger.debug("Registered %r from %s", extension, member)
