import logging
from typing import Annotated, ClassVar

import pytest

from extension_kit.extensions.base import Extension, RegisterExtension
from extension_kit.introspection.members import MemberDescriptor
from extension_kit.introspection.reader import read_field_value
from extension_kit.introspection.scanner import find_annotated_fields


class Widget(Extension):
    pass


class Holder:
    shared: ClassVar[Annotated[Widget, RegisterExtension]] = Widget()
    unset_shared: ClassVar[Annotated[Widget, RegisterExtension]]
    owned: Annotated[Widget, RegisterExtension]
    never_assigned: Annotated[Widget, RegisterExtension]
    empty: Annotated[Widget, RegisterExtension]
    failing: Annotated[Widget, RegisterExtension]

    def __init__(self) -> None:
        self.owned = Widget()
        self.empty = None

    @property
    def failing(self) -> Widget:  # type: ignore[override]
        raise RuntimeError("boom")


@pytest.fixture
def members() -> dict[str, MemberDescriptor]:
    return {m.name: m for m in find_annotated_fields(Holder, RegisterExtension)}


def test_read_static_field_from_declaring_class(members) -> None:
    assert read_field_value(members["shared"]) is Holder.shared


def test_read_static_field_ignores_instance(members) -> None:
    assert read_field_value(members["shared"], Holder()) is Holder.shared


def test_read_instance_field(members) -> None:
    holder = Holder()
    assert read_field_value(members["owned"], holder) is holder.owned


def test_read_instance_field_without_instance_is_absent(members) -> None:
    assert read_field_value(members["owned"]) is None


@pytest.mark.parametrize("name", ["unset_shared", "never_assigned", "empty", "failing"])
def test_unreadable_values_are_absent(members, name: str) -> None:
    holder = Holder()
    assert read_field_value(members[name], holder) is None


def test_read_failure_is_logged_at_debug(members, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="extension_kit")
    read_field_value(members["failing"], Holder())

    records = [r for r in caplog.records if r.name == "extension_kit.introspection.reader"]
    assert records
    assert records[-1].levelno == logging.DEBUG
    assert records[-1].exc_info is not None


def test_read_does_not_mutate_instance(members) -> None:
    holder = Holder()
    before = dict(vars(holder))
    for member in members.values():
        read_field_value(member, holder)
    assert vars(holder) == before
