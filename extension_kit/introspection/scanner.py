from __future__ import annotations

"""Discovery of marker-annotated fields.

Fields are declared through class annotations. A field is *marked* when its
annotation carries the marker in ``typing.Annotated`` metadata, and *static*
when the annotation is a ``typing.ClassVar``::

    class Service:
        shared: ClassVar[Annotated[Cache, RegisterExtension]] = Cache()
        per_instance: Annotated[Retry, RegisterExtension]

The scanner walks the class hierarchy top-down (base classes first), keeps
the annotation order of every class level, and drops a base-class field when a
more derived class declares the same name again.
"""

import inspect
import types
import typing
from typing import Annotated, Any, Callable, ClassVar, Dict, Iterator, List, Optional, Tuple, Union

from ..core.logging_config import get_logger
from ..errors import FieldScanError
from .members import MemberDescriptor, is_private_name

logger = get_logger(__name__)

MemberPredicate = Callable[[MemberDescriptor], bool]

_UNION_ORIGINS = (Union, types.UnionType)


def _unwrap_annotation(hint: Any) -> Tuple[Any, bool, List[Any]]:
    """Strip ``Annotated``/``ClassVar``/``Optional`` wrappers from a type hint.

    Returns:
        A ``(declared_type, static, metadata)`` tuple where ``metadata`` holds
        every ``Annotated`` extra found on the way down.
    """
    static = False
    metadata: List[Any] = []
    while True:
        if hint is ClassVar:
            return Any, True, metadata
        origin = typing.get_origin(hint)
        if origin is Annotated:
            hint, *extras = typing.get_args(hint)
            metadata.extend(extras)
        elif origin is ClassVar:
            static = True
            (hint,) = typing.get_args(hint)
        elif origin in _UNION_ORIGINS:
            args = [arg for arg in typing.get_args(hint) if arg is not type(None)]
            if len(args) != 1:
                return hint, static, metadata
            hint = args[0]
        else:
            return hint, static, metadata


def _has_marker(metadata: List[Any], marker: type) -> bool:
    return any(item is marker or isinstance(item, marker) for item in metadata)


def _raw_annotations(klass: type) -> Dict[str, Any]:
    """Return the annotations declared on ``klass`` itself, unevaluated where possible."""
    try:
        return dict(inspect.get_annotations(klass))
    except NameError:
        # Lazily evaluated annotations (3.14+) may name something never defined.
        import annotationlib

        return dict(annotationlib.get_annotations(klass, format=annotationlib.Format.FORWARDREF))


def _resolve_annotation(klass: type, name: str, raw: Any) -> Any:
    """Evaluate a single annotation of ``klass`` in the scope it was written in."""
    holder = type(klass.__name__, (), {"__annotations__": {name: raw}, "__module__": klass.__module__})
    return typing.get_type_hints(holder, localns=dict(vars(klass)), include_extras=True)[name]


def _could_carry_marker(raw: Any, marker: type) -> bool:
    text = raw if isinstance(raw, str) else repr(raw)
    return marker.__name__ in text


def _declared_fields(klass: type, marker: type) -> Iterator[Tuple[str, Optional[MemberDescriptor]]]:
    """Yield every name declared on ``klass`` itself, in annotation order.

    The descriptor is ``None`` for names that do not carry the marker; they are
    still reported so that they can shadow marked fields of base classes.
    Annotations are resolved one at a time: one that cannot be resolved only
    fails the scan if it may carry the marker, otherwise it counts as unmarked.
    """
    try:
        annotations = _raw_annotations(klass)
    except Exception as e:
        raise FieldScanError(klass, f"{type(e).__name__}: {e}") from e

    for name, raw in annotations.items():
        try:
            hint = _resolve_annotation(klass, name, raw)
        except Exception as e:
            if _could_carry_marker(raw, marker):
                raise FieldScanError(klass, f"field '{name}': {type(e).__name__}: {e}") from e
            logger.debug("Treating unresolvable annotation %s.%s as unmarked: %s", klass.__qualname__, name, e)
            yield name, None
            continue

        declared_type, static, metadata = _unwrap_annotation(hint)
        if not _has_marker(metadata, marker):
            yield name, None
            continue
        yield name, MemberDescriptor(
            name=name,
            declared_type=declared_type,
            static=static,
            private=is_private_name(name),
            declaring_type=klass,
        )


def find_annotated_fields(
    klass: type,
    marker: type,
    predicate: Optional[MemberPredicate] = None,
) -> List[MemberDescriptor]:
    """
    Find the fields of ``klass`` annotated with ``marker``.

    Args:
        klass: The class to scan, including its base classes.
        marker: The marker class; either the class or an instance of it may
            appear in the ``Annotated`` metadata.
        predicate: Optional filter applied to every marked field.

    Returns:
        The matching descriptors, base-class fields first, each class level in
        declaration order.

    Raises:
        FieldScanError: If ``klass`` is not a class, or an annotation that
            may carry ``marker`` cannot be resolved.
    """
    if not inspect.isclass(klass):
        raise FieldScanError(klass, "not a class")

    found: Dict[str, MemberDescriptor] = {}
    for level in reversed(klass.__mro__):
        if level is object:
            continue
        for name, member in _declared_fields(level, marker):
            # Redeclaration shadows the inherited field and moves it to this level.
            found.pop(name, None)
            if member is not None:
                found[name] = member

    if predicate is None:
        return list(found.values())
    return [member for member in found.values() if predicate(member)]
