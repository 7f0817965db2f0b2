"""Extension fields and their registration.

An *extension* is a piece of pluggable behavior that a class opts into by
declaring it as an annotated field instead of writing registration code.

- Static fields (``ClassVar``) are registered from the class alone.
- Instance fields are registered once an instance exists.
- Only public fields whose declared type is an ``Extension`` qualify.

This package exports:

- ``Extension``/``RegisterExtension``: capability base class and field marker.
- ``ExtensionRegistry``/``ExtensionRegistrar``: default registry and the
  protocol any registration target implements.
- ``ExtensionFieldPredicate`` and its two singletons: eligibility rules.
- ``register_extensions_from_fields``: the registration pass.
"""

from .base import Extension, RegisterExtension
from .eligibility import (
    IS_NON_STATIC_EXTENSION_FIELD,
    IS_STATIC_EXTENSION_FIELD,
    ExtensionFieldPredicate,
    extension_field_predicate,
)
from .registry import ExtensionRegistrar, ExtensionRegistry, RegisteredExtension
from .utils import register_extensions_from_fields

__all__ = [
    "Extension",
    "RegisterExtension",
    "ExtensionRegistrar",
    "ExtensionRegistry",
    "RegisteredExtension",
    "ExtensionFieldPredicate",
    "IS_STATIC_EXTENSION_FIELD",
    "IS_NON_STATIC_EXTENSION_FIELD",
    "extension_field_predicate",
    "register_extensions_from_fields",
]
