from __future__ import annotations

"""Descriptors for fields discovered on a class.

A ``MemberDescriptor`` is produced by the field scanner for every annotated
name of a class level and is consumed read-only by the eligibility rules, the
value reader and the registry (as provenance of a registered extension).
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class MemberDescriptor:
    """Immutable description of one declared field.

    Attributes
    ----------
    name:
        The attribute name as stored on the class (name-mangled for ``__x``).
    declared_type:
        The annotation with ``ClassVar``, ``Annotated`` and ``Optional``
        wrappers removed. May be a non-class typing construct.
    static:
        ``True`` when the annotation is a ``ClassVar``.
    private:
        ``True`` when the name starts with an underscore.
    declaring_type:
        The class whose own annotations declare the field.
    """

    name: str
    declared_type: Any
    static: bool
    private: bool
    declaring_type: type

    @property
    def qualified_name(self) -> str:
        return f"{self.declaring_type.__qualname__}.{self.name}"

    @property
    def is_public(self) -> bool:
        return not self.private

    def __str__(self) -> str:
        kind = "static field" if self.static else "field"
        return f"{kind} {self.qualified_name}"


def is_private_name(name: str) -> bool:
    """Return True for names hidden by convention (leading underscore)."""
    return name.startswith("_")


def is_static(member: MemberDescriptor) -> bool:
    return member.static


def is_private(member: MemberDescriptor) -> bool:
    return member.private
