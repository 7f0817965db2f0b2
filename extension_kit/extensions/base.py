from __future__ import annotations

"""Extension marker types.

``Extension`` is the capability every registered value must satisfy.
``RegisterExtension`` is the marker placed in ``typing.Annotated`` metadata to
opt a field into registration::

    class Service:
        timing: ClassVar[Annotated[TimingExtension, RegisterExtension]] = TimingExtension()
        retry: Annotated[RetryExtension, RegisterExtension()]
"""

from abc import ABC


class Extension(ABC):
    """Marker base class for pluggable behavior.

    Subclass it directly, or declare an existing class as an extension with
    ``Extension.register(SomeClass)``.
    """


class RegisterExtension:
    """Marker offering an annotated field to the extension registry.

    The class itself or any instance of it may be used as ``Annotated``
    metadata.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "RegisterExtension()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, RegisterExtension)

    def __hash__(self) -> int:
        return hash(RegisterExtension)
