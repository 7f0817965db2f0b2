from __future__ import annotations

from typing import Any, List, Optional, Tuple

import pytest

from extension_kit.extensions.registry import ExtensionRegistry
from extension_kit.introspection.members import MemberDescriptor


class RecordingRegistrar:
    """Registration target remembering every call in order."""

    def __init__(self) -> None:
        self.calls: List[Tuple[Any, Optional[MemberDescriptor]]] = []

    def register_extension(self, extension: Any, source: Optional[MemberDescriptor] = None) -> None:
        self.calls.append((extension, source))

    @property
    def names(self) -> List[str]:
        return [source.name for _, source in self.calls if source is not None]


@pytest.fixture
def registrar() -> RecordingRegistrar:
    """Fixture providing a registration target that records calls."""
    return RecordingRegistrar()


@pytest.fixture
def registry() -> ExtensionRegistry:
    """Fixture providing an empty in-memory extension registry."""
    return ExtensionRegistry()
