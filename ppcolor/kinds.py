"""
Value shape classification for the pretty printers.

Every value is assigned exactly one Kind, which decides the renderer used for it.
Classification is total: shapes that match nothing fall through to Kind.SCALAR.

Priority:
    - Registered adapters (see register_kind), resolved along the type MRO
    - named tuple → RECORD (fields are declared by name)
    - tuple → SEQUENCE ("Array")
    - other non-textual Sequence → SEQUENCE ("Slice"); str, bytes, bytearray and UserString are textual
    - Mapping → MAPPING
    - dataclass instance → RECORD
    - everything else → SCALAR
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
import dataclasses
from collections import UserString
from enum import Enum, unique
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import class_name


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Kind(Enum):
    """Shape of a value."""
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    RECORD = "record"


@unique
class Mode(Enum):
    """Layout of a rendering: INLINE for nested children, BLOCK for top-level prints."""
    INLINE = "inline"
    BLOCK = "block"


_ADAPTERS: dict[type, Kind] = {}


# Methods --------------------------------------------------------------------------------------------------------------

def classify(value: Any) -> Kind:
    """
    Assign the Kind of a value.

    Named tuples match the fixed-size tuple rule too, but are checked first and
    classified as RECORD because their fields are declared by name.
    UserString is textual like str and renders as a scalar.

    Examples:
        >>> classify([1, 2])
        <Kind.SEQUENCE: 'sequence'>
        >>> classify({"a": 1})
        <Kind.MAPPING: 'mapping'>
        >>> classify("text")
        <Kind.SCALAR: 'scalar'>
    """
    kind = _adapter_kind(type(value))
    if kind is not None:
        return kind

    if is_named_tuple(value):
        return Kind.RECORD
    if isinstance(value, tuple):
        return Kind.SEQUENCE
    if isinstance(value, abc.Sequence) and not _is_textual(value):
        return Kind.SEQUENCE
    if isinstance(value, abc.Mapping):
        return Kind.MAPPING
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return Kind.RECORD
    return Kind.SCALAR


def sequence_label(value: Any) -> str:
    """Header label for a sequence: 'Array' for fixed-size tuples, 'Slice' otherwise."""
    return "Array" if isinstance(value, tuple) else "Slice"


def register_kind(cls: type, kind: Kind) -> None:
    """
    Register the Kind for instances of cls and its subclasses.

    Overrides the builtin shape checks. Types registered as SEQUENCE must be iterable,
    as MAPPING must provide items(); RECORD types expose their public instance attributes.

    Raises:
        TypeError: If cls is not a class or kind is not a Kind.
    """
    if not isinstance(cls, type):
        raise TypeError(f"expected a class, got <{class_name(cls)}>")
    if not isinstance(kind, Kind):
        raise TypeError(f"expected Kind, got <{class_name(kind)}>")
    _ADAPTERS[cls] = kind


def unregister_kind(cls: type) -> None:
    """Remove a registration made by register_kind(). Unknown classes are ignored."""
    _ADAPTERS.pop(cls, None)


def is_named_tuple(value: Any) -> bool:
    """True for instances of collections.namedtuple and typing.NamedTuple classes."""
    return isinstance(value, tuple) and isinstance(getattr(type(value), "_fields", None), tuple)


# Private Methods ------------------------------------------------------------------------------------------------------

def _adapter_kind(cls: type) -> Kind | None:
    if not _ADAPTERS:
        return None
    for base in cls.__mro__:
        if base in _ADAPTERS:
            return _ADAPTERS[base]
    return None


def _is_textual(x: Any) -> bool:
    return isinstance(x, (str, bytes, bytearray, UserString))
