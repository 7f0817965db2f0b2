"""extension-kit.

This package lets a class opt pieces of pluggable behavior (*extensions*) into
a registry by declaring them as annotated fields, instead of writing manual
registration code.

Declaring extensions
--------------------

::

    from typing import Annotated, ClassVar

    from extension_kit import Extension, ExtensionRegistry, RegisterExtension, register_extensions_from_fields


    class Timing(Extension): ...


    class Service:
        timing: ClassVar[Annotated[Timing, RegisterExtension]] = Timing()
        per_call: Annotated[Timing, RegisterExtension]

        def __init__(self) -> None:
            self.per_call = Timing()


    registry = ExtensionRegistry()
    register_extensions_from_fields(Service, registry)               # static pass
    register_extensions_from_fields(Service, registry, Service())    # instance pass

Core subpackages
----------------

- ``extension_kit.introspection``: field discovery and value reading.
- ``extension_kit.extensions``: marker types, eligibility rules, registry and
  the registration pass.
- ``extension_kit.core``: settings and logging configuration.
"""

from extension_kit.errors import (
    CapabilityMismatchError,
    ExtensionKitError,
    FieldScanError,
    InvalidInvocationError,
)
from extension_kit.extensions import (
    Extension,
    ExtensionRegistrar,
    ExtensionRegistry,
    RegisterExtension,
    register_extensions_from_fields,
)
from extension_kit.introspection import MemberDescriptor

__all__ = [
    "CapabilityMismatchError",
    "Extension",
    "ExtensionKitError",
    "ExtensionRegistrar",
    "ExtensionRegistry",
    "FieldScanError",
    "InvalidInvocationError",
    "MemberDescriptor",
    "RegisterExtension",
    "register_extensions_from_fields",
]
