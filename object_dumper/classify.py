"""Value classification and member/element access for the dumper.

Every value is exactly one of three shapes:

- ``Shape.SCALAR``: ``None``, numbers, booleans, strings, bytes, dates and
  times, enum members and a few other atomic types. Never iterated.
- ``Shape.ENUMERABLE``: any other iterable that is not a record.
- ``Shape.COMPOSITE``: everything else; rendered as ``name=value`` pairs.

Types can opt in explicitly instead of relying on introspection:
``__dump_members__()`` returns ordered ``(name, value)`` pairs and
``__dump_elements__()`` returns ordered elements.
"""
from __future__ import annotations

import dataclasses
import datetime
import decimal
import enum
import fractions
import functools
import pathlib
import types
import uuid
from collections.abc import Iterable, Mapping
from typing import Any, Iterator, List, Tuple

from .errors import MemberAccessError

MEMBERS_HOOK = '__dump_members__'
ELEMENTS_HOOK = '__dump_elements__'

SCALAR_TYPES = (
    bool,
    int,
    float,
    complex,
    decimal.Decimal,
    fractions.Fraction,
    str,
    bytes,
    bytearray,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    uuid.UUID,
    enum.Enum,
    pathlib.PurePath,
)

# Displayed with str(), never introspected.
OPAQUE_TYPES = (
    type,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.ModuleType,
)


class Shape(enum.Enum):
    SCALAR = 'scalar'
    ENUMERABLE = 'enumerable'
    COMPOSITE = 'composite'


def is_namedtuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), '_fields')


def classify(value: Any) -> Shape:
    if value is None:
        return Shape.SCALAR
    cls = type(value)
    if hasattr(cls, MEMBERS_HOOK):
        return Shape.COMPOSITE
    if hasattr(cls, ELEMENTS_HOOK):
        return Shape.ENUMERABLE
    if isinstance(value, SCALAR_TYPES) or isinstance(value, OPAQUE_TYPES):
        return Shape.SCALAR
    if isinstance(value, Mapping) or is_namedtuple(value) or dataclasses.is_dataclass(value):
        return Shape.COMPOSITE
    if isinstance(value, Iterable):
        return Shape.ENUMERABLE
    return Shape.COMPOSITE


def iter_elements(value: Any) -> Iterator[Any]:
    """Iterate the elements of an enumerable value in iteration order."""
    hook = getattr(type(value), ELEMENTS_HOOK, None)
    if hook is not None:
        return iter(hook(value))
    return iter(value)


def list_members(value: Any) -> List[Tuple[str, Any]]:
    """Return the public ``(name, value)`` pairs of a composite value.

    Raises ``MemberAccessError`` when a public member cannot be read.
    """
    hook = getattr(type(value), MEMBERS_HOOK, None)
    if hook is not None:
        return [(str(name), member) for name, member in hook(value)]
    if isinstance(value, Mapping):
        return [(str(key), member) for key, member in value.items()]
    if is_namedtuple(value):
        return list(zip(value._fields, value))

    if dataclasses.is_dataclass(value):
        names = [f.name for f in dataclasses.fields(value) if not f.name.startswith('_')]
        names += [name for name in public_property_names(type(value)) if name not in names]
    else:
        names = public_member_names(value)
    return [(name, _read_member(value, name)) for name in names]


def public_member_names(value: Any) -> List[str]:
    """Instance attributes, then set slots, then properties in declaration order."""
    names: List[str] = []
    seen = set()

    def add(name):
        if isinstance(name, str) and not name.startswith('_') and name not in seen:
            seen.add(name)
            names.append(name)

    instance_dict = getattr(value, '__dict__', None)
    if isinstance(instance_dict, dict):
        for name in instance_dict:
            add(name)

    klasses = [k for k in type(value).__mro__ if k is not object]
    for klass in reversed(klasses):
        slots = vars(klass).get('__slots__', ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            descriptor = vars(klass).get(slot)
            # Unassigned slots are not part of the value.
            if descriptor is not None and _slot_is_set(descriptor, value):
                add(slot)

    for name in public_property_names(type(value)):
        add(name)

    return names


def public_property_names(cls: type) -> List[str]:
    """Public properties and cached properties, most-derived class first."""
    names: List[str] = []
    for klass in cls.__mro__:
        if klass is object:
            continue
        for name, attr in vars(klass).items():
            if not isinstance(attr, (property, functools.cached_property)):
                continue
            if not name.startswith('_') and name not in names:
                names.append(name)
    return names


def _slot_is_set(descriptor: Any, value: Any) -> bool:
    try:
        descriptor.__get__(value, type(value))
    except AttributeError:
        return False
    return True


def _read_member(value: Any, name: str) -> Any:
    try:
        return getattr(value, name)
    except Exception as exc:
        raise MemberAccessError(type(value).__name__, name) from exc
