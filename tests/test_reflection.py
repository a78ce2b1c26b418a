"""Tests for yamlbind.serialization.reflection."""

import pytest
from dataclasses import InitVar, dataclass, field
from typing import Annotated, ClassVar, Final, Optional

from yamlbind.serialization.reflection import (
    FieldInfo,
    get_public_instance_fields,
    unwrap_annotated,
)


class Marker:
    pass


@dataclass
class Record:
    key: str
    scale: InitVar[float] = 1.0
    version: ClassVar[int] = 2
    size: Annotated[int, "units"] = field(default=0, metadata={"min": 0})

    def __post_init__(self, scale):
        self.size = int(self.size * scale)


class Parent:
    __slots__ = ("left", "_hidden")


class Child(Parent):
    __slots__ = "right"
    right: Optional[int]


class Forward:
    marker: "Marker"
    items: "Optional[Marker]"


class TestUnwrapAnnotated:
    """Tests for unwrap_annotated."""

    def test_plain_type(self):
        assert unwrap_annotated(int) == (int, ())

    def test_annotated(self):
        marker = Marker()
        assert unwrap_annotated(Annotated[str, marker, 3]) == (str, (marker, 3))

    def test_final(self):
        assert unwrap_annotated(Final[int]) == (int, ())

    def test_bare_final(self):
        assert unwrap_annotated(Final) == (object, ())

    def test_annotated_inside_final(self):
        marker = Marker()
        assert unwrap_annotated(Final[Annotated[str, marker]]) == (str, (marker,))


class TestGetPublicInstanceFields:
    """Tests for get_public_instance_fields."""

    def test_dataclass_fields(self):
        fields = get_public_instance_fields(Record)
        assert [f.name for f in fields] == ["key", "size"]

    def test_field_info(self):
        size = {f.name: f for f in get_public_instance_fields(Record)}["size"]
        assert isinstance(size, FieldInfo)
        assert size.field_type is int
        assert size.declaring_type is Record
        assert size.metadata == ("units", 0)

    def test_slots_across_hierarchy(self):
        fields = {f.name: f for f in get_public_instance_fields(Child)}
        assert set(fields) == {"left", "right"}
        assert fields["left"].field_type is object
        assert fields["left"].declaring_type is Parent
        assert fields["right"].field_type == Optional[int]
        assert fields["right"].declaring_type is Child

    def test_base_fields_come_first(self):
        class A:
            a: int

        class B(A):
            b: int
            a: str

        fields = get_public_instance_fields(B)
        assert [f.name for f in fields] == ["a", "b"]
        assert fields[0].field_type is str
        assert fields[0].declaring_type is B

    def test_unresolvable_annotation_propagates(self):
        class Broken:
            ref: "DoesNotExist"  # noqa: F821

        with pytest.raises(NameError):
            get_public_instance_fields(Broken)

    def test_final_fields(self):
        @dataclass
        class Limits:
            ceiling: Final[int] = 3
            label: Final = "max"

        fields = {f.name: f.field_type for f in get_public_instance_fields(Limits)}
        assert fields == {"ceiling": int, "label": object}

    def test_unresolvable_private_annotation_ignored(self):
        class Pending:
            value: int
            _later: "DoesNotExist"  # noqa: F821

        fields = get_public_instance_fields(Pending)
        assert [(f.name, f.field_type) for f in fields] == [("value", int)]

    def test_string_annotations_resolved(self):
        fields = {f.name: f for f in get_public_instance_fields(Forward)}
        assert fields["marker"].field_type is Marker
        assert fields["items"].field_type == Optional[Marker]

    def test_field_info_is_immutable(self):
        info = FieldInfo(name="x", field_type=int, declaring_type=object)
        with pytest.raises(AttributeError):
            info.name = "y"
