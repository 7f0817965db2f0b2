from __future__ import annotations

"""Eligibility rules for extension fields.

A discovered field is registered only if it passes three independent rules,
evaluated in this order:

- ownership: static for the class pass, non-static for the instance pass,
- visibility: never private,
- type: the declared type satisfies the capability type.

The static and the instance rule sets differ only in the polarity of the
ownership rule, so both are instances of one parameterised predicate.
"""

import inspect
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from ..introspection.members import MemberDescriptor, is_private, is_static
from .base import Extension


def is_assignable_to(declared_type: Any, capability_type: type) -> bool:
    """Return True if a field declared as ``declared_type`` can only hold capability values."""
    if not inspect.isclass(declared_type):
        return False
    try:
        return issubclass(declared_type, capability_type)
    except TypeError:
        # Parameterised generics pass isclass() on some interpreters.
        return False


@dataclass(frozen=True)
class ExtensionFieldPredicate:
    """Predicate deciding whether a field qualifies for registration.

    Attributes
    ----------
    require_static:
        ``True`` to accept only static fields, ``False`` to accept only
        instance fields.
    capability_type:
        The type the declared field type must satisfy.
    """

    require_static: bool
    capability_type: type = Extension

    def __call__(self, member: MemberDescriptor) -> bool:
        # One statement per rule; keep them apart.
        if not self.check_ownership(member):
            return False
        if not self.check_visibility(member):
            return False
        if not self.check_type(member):
            return False
        return True

    def check_ownership(self, member: MemberDescriptor) -> bool:
        return is_static(member) == self.require_static

    def check_visibility(self, member: MemberDescriptor) -> bool:
        return not is_private(member)

    def check_type(self, member: MemberDescriptor) -> bool:
        return is_assignable_to(member.declared_type, self.capability_type)


IS_STATIC_EXTENSION_FIELD = ExtensionFieldPredicate(require_static=True)
IS_NON_STATIC_EXTENSION_FIELD = ExtensionFieldPredicate(require_static=False)


@lru_cache(maxsize=None)
def extension_field_predicate(static: bool, capability_type: type = Extension) -> ExtensionFieldPredicate:
    """
    Return the predicate for one registration pass.

    Args:
        static: Whether the pass registers static (class) fields.
        capability_type: The type registered values must satisfy.

    Returns:
        One of the module singletons for ``Extension``, otherwise a predicate
        built once per capability type.
    """
    if capability_type is Extension:
        return IS_STATIC_EXTENSION_FIELD if static else IS_NON_STATIC_EXTENSION_FIELD
    return ExtensionFieldPredicate(require_static=static, capability_type=capability_type)
