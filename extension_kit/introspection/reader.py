"""Best-effort reading of field values."""

from __future__ import annotations

from typing import Any, Optional

from ..core.logging_config import get_logger
from .members import MemberDescriptor

logger = get_logger(__name__)


def read_field_value(member: MemberDescriptor, instance: Any = None) -> Optional[Any]:
    """
    Read the current value of a field.

    Static fields are read from their declaring class and ignore ``instance``.
    Instance fields are read from ``instance`` and are unreadable without one.
    Reading never mutates the owner.

    Args:
        member: Descriptor of the field to read.
        instance: The owning instance, or ``None`` for static fields.

    Returns:
        The field value, or ``None`` when the value is absent or cannot be read.
    """
    if member.static:
        target: Any = member.declaring_type
    elif instance is None:
        logger.debug("No instance supplied to read %s", member)
        return None
    else:
        target = instance

    try:
        return getattr(target, member.name)
    except Exception:
        logger.debug("Unable to read %s", member, exc_info=True)
        return None
