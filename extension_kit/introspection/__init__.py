"""Class introspection used to discover registrable fields.

This package exports:

- ``MemberDescriptor``: immutable description of one declared field.
- ``find_annotated_fields``: ordered discovery of marker-annotated fields.
- ``read_field_value``: best-effort value access returning ``None`` when a
  value cannot be obtained.
"""

from .members import MemberDescriptor, is_private, is_static
from .reader import read_field_value
from .scanner import MemberPredicate, find_annotated_fields

__all__ = [
    "MemberDescriptor",
    "MemberPredicate",
    "find_annotated_fields",
    "is_private",
    "is_static",
    "read_field_value",
]
