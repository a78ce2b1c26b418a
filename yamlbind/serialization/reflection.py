"""Field metadata for plain Python classes.

Python has no declared field table, so the fields of a class are
derived from what the class body states about its instances:

- annotated names (``x: int``), as used by dataclasses, attrs-style
  classes and hand-written records;
- names listed in ``__slots__``.

Both are collected across the whole MRO. Names starting with an
underscore are private, ``ClassVar`` annotations are class-level,
``InitVar`` annotations are never stored, and names bound to a
``property`` are accessors; none of those are fields. Attributes that
are only assigned in ``__init__`` are invisible here.

When a subclass redeclares a field, the most-derived declaration
supplies its type and metadata, and the field keeps the position of
its first declaration. Only the annotations of public fields are
evaluated.
"""

import dataclasses
import inspect
import typing
from dataclasses import dataclass
from typing import Any, Annotated, ClassVar, Dict, Final, List, Tuple


@dataclass(frozen=True)
class FieldInfo:
    """Describes one public instance field of a class."""

    name: str
    field_type: Any
    declaring_type: type
    metadata: Tuple[Any, ...] = ()


def _own_field_names(klass: type) -> List[str]:
    names = list(inspect.get_annotations(klass))
    slots = klass.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    for name in slots:
        if name not in ("__dict__", "__weakref__") and name not in names:
            names.append(name)
    return names


def _is_class_var(hint: Any) -> bool:
    return hint is ClassVar or typing.get_origin(hint) is ClassVar


def _is_init_var(hint: Any) -> bool:
    return hint is dataclasses.InitVar or isinstance(hint, dataclasses.InitVar)


def unwrap_annotated(hint: Any) -> Tuple[Any, Tuple[Any, ...]]:
    """Split ``Annotated[T, *extras]`` into ``T`` and its extras.

    ``Final`` qualifiers are stripped as well, in any nesting with
    ``Annotated``; a bare ``Final`` leaves ``object``. Any other hint is
    returned as is, with no extras.
    """
    metadata: Tuple[Any, ...] = ()
    while True:
        origin = typing.get_origin(hint)
        if origin is Annotated:
            metadata += tuple(hint.__metadata__)
            hint = hint.__origin__
        elif hint is Final:
            return object, metadata
        elif origin is Final:
            hint = typing.get_args(hint)[0]
        else:
            return hint, metadata


def _resolve_hint(klass: type, name: str) -> Any:
    # Only this annotation is evaluated, in the scope of the class declaring it.
    holder = type(
        klass.__name__,
        (),
        {
            "__annotations__": {name: inspect.get_annotations(klass)[name]},
            "__module__": klass.__module__,
        },
    )
    return typing.get_type_hints(holder, localns=dict(vars(klass)), include_extras=True)[name]


def _dataclass_metadata(klass: type, name: str) -> Tuple[Any, ...]:
    f = klass.__dict__.get("__dataclass_fields__", {}).get(name)
    if f is None:
        return ()
    return tuple(f.metadata.values())


def get_public_instance_fields(cls: type) -> List[FieldInfo]:
    """Collect the public instance fields of a class and its bases.

    Args:
        cls: The class to inspect.

    Returns:
        One :class:`FieldInfo` per field name, base-class fields first.

    Raises:
        NameError: If the annotation of a public field refers to a name
            that cannot be resolved.
    """
    declaring: Dict[str, type] = {}
    annotating: Dict[str, type] = {}
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        annotations = inspect.get_annotations(klass)
        for name in _own_field_names(klass):
            declaring[name] = klass
            if name in annotations:
                annotating[name] = klass

    fields = []
    for name, klass in declaring.items():
        if name.startswith("_"):
            continue
        hint = _resolve_hint(annotating[name], name) if name in annotating else object
        field_type, metadata = unwrap_annotated(hint)
        if _is_class_var(field_type) or _is_init_var(field_type):
            continue
        if isinstance(inspect.getattr_static(cls, name, None), property):
            continue
        fields.append(
            FieldInfo(
                name=name,
                field_type=field_type,
                declaring_type=klass,
                metadata=metadata + _dataclass_metadata(klass, name),
            )
        )
    return fields
