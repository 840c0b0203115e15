"""
Recursive color formatters for terminal debugging.

Renders any value as colorized text in one of two layouts:
    - Mode.BLOCK: headered, multi-line text for top-level prints
    - Mode.INLINE: a single compact fragment used for nested children

The pformat() function classifies the value and dispatches to the shape formatters
fmt_scalar(), fmt_sequence(), fmt_mapping() and fmt_record(). Sequence items and mapping
values always recurse inline; record fields are shown as raw reprs unless
PPOptions.expand_records is set.
"""

# ## Scope
#
# Output is for human eyes only. It is not valid JSON nor Python source and is not meant
# to be parsed back. There is no cycle detection: a self-referential container raises
# RecursionError.

# Standard library -----------------------------------------------------------------------------------------------------
import dataclasses
import warnings
from dataclasses import dataclass
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .colors import Color, as_color, wrap
from .kinds import Kind, Mode, classify, is_named_tuple, sequence_label
from .utils import class_name, common_class


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class PPOptions:
    """
    Rendering options passed per call through the `opts` argument.

    Attributes:
        sort_keys: Sort mapping entries by key repr. By default mappings keep their own
            iteration order (insertion order for dict), which is reproducible across runs.
        expand_records: Render record field values through the inline formatter instead
            of their raw repr, so nested containers inside records are pretty-printed too.
        unknown_type: Type name reported for the elements, keys and values of empty collections.
        fully_qualified: Use module-qualified names for user types in headers.

    Examples:
        >>> opts = PPOptions.debug()
        >>> opts.sort_keys, opts.expand_records
        (True, True)
        >>> PPOptions().merge(unknown_type="?").unknown_type
        '?'
    """
    sort_keys: bool = False
    expand_records: bool = False
    unknown_type: str = "unknown"
    fully_qualified: bool = False

    def __post_init__(self):
        if not isinstance(self.unknown_type, str):
            raise TypeError(f"unknown_type must be str, got <{class_name(self.unknown_type)}>")

    @classmethod
    def debug(cls) -> "PPOptions":
        """Deterministic and deep: sorted mapping keys, expanded records."""
        return cls(sort_keys=True, expand_records=True)

    @classmethod
    def plain(cls) -> "PPOptions":
        """Default rendering."""
        return cls()

    def merge(self, **kwargs) -> "PPOptions":
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **kwargs)


class _MissingField:
    """Stand-in for a declared record field which has no value."""

    def __repr__(self) -> str:
        return "<missing>"


_MISSING = _MissingField()


# Methods --------------------------------------------------------------------------------------------------------------

def pformat(
    value: Any,
    color: Color | str = Color.BLUE,
    mode: Mode | str = Mode.BLOCK,
    *,
    opts: PPOptions | None = None,
) -> str:
    """
    Format any value as colorized text.

    Args:
        value: Any Python object. It is never modified.
        color: The color of headers, indices, keys and field names. The whole
            rendering uses this single color.
        mode: Mode.BLOCK for a headered multi-line text, Mode.INLINE for a compact fragment.
        opts: Rendering options, PPOptions() if None.

    Returns:
        The rendered text with ANSI escapes.

    Raises:
        TypeError, ValueError: If color, mode or opts are invalid.
        RecursionError: If value contains itself.

    Examples:
        >>> from ppcolor.colors import strip_ansi
        >>> strip_ansi(pformat([1, 2, 3]))
        'Slice with 3 elements of type int:\\n\\n[0] 1\\n[1] 2\\n[2] 3\\n\\n'
        >>> strip_ansi(pformat({"a": [1]}, mode="inline"))
        "{['a'] {[0] 1}}"
    """
    color, mode, opts = _resolve(color, mode, opts)
    return _format(value, color, mode, opts)


def fmt_scalar(value: Any, color: Color | str = Color.BLUE, mode: Mode | str = Mode.BLOCK, *,
               opts: PPOptions | None = None) -> str:
    """
    Format a value as a leaf.

    INLINE returns the plain repr. BLOCK returns the repr followed by the colored
    type name in parentheses and a blank line: `42 (int)\\n\\n`.
    """
    color, mode, opts = _resolve(color, mode, opts)
    return _fmt_scalar(value, color, mode, opts)


def fmt_sequence(value: Any, color: Color | str = Color.BLUE, mode: Mode | str = Mode.BLOCK, *,
                 label: str | None = None, opts: PPOptions | None = None) -> str:
    """
    Format a sequence with its items indexed.

    BLOCK layout:

        Slice with 3 elements of type int:

        [0] 1
        [1] 2
        [2] 3

    Indices are right-justified to the width of the last index. INLINE layout is
    `{[0] 1, [1] 2, [2] 3}`. Items are always rendered inline.

    Args:
        label: Header label. Defaults to 'Array' for tuples and 'Slice' for other sequences.

    Non-sequence values are delegated to pformat().
    """
    color, mode, opts = _resolve(color, mode, opts)
    if classify(value) is not Kind.SEQUENCE:
        return _format(value, color, mode, opts)
    return _fmt_sequence(value, color, mode, opts, label=label)


def fmt_mapping(value: Any, color: Color | str = Color.BLUE, mode: Mode | str = Mode.BLOCK, *,
                opts: PPOptions | None = None) -> str:
    """
    Format a mapping with its entries keyed by key repr.

    BLOCK layout:

        Map: 2 elements, key type str, value type int:

        ['a'] 1
        ['b'] 2

    INLINE layout is `{['a'] 1, ['b'] 2}`. Values are always rendered inline.
    An empty mapping reports the PPOptions.unknown_type placeholder for both types.

    Non-mapping values are delegated to pformat().
    """
    color, mode, opts = _resolve(color, mode, opts)
    if classify(value) is not Kind.MAPPING:
        return _format(value, color, mode, opts)
    return _fmt_mapping(value, color, mode, opts)


def fmt_record(value: Any, color: Color | str = Color.BLUE, mode: Mode | str = Mode.BLOCK, *,
               opts: PPOptions | None = None) -> str:
    """
    Format a record (dataclass instance or named tuple) field by field.

    BLOCK layout, field names padded to the longest one:

        Record with 2 fields:

        {
          A   : 1
          Name: 'x'
        }

    INLINE layout is `{A: 1, Name: 'x'}`. Field values are shown as their raw repr,
    nested containers included, unless opts.expand_records is set.

    Non-record values are delegated to pformat().
    """
    color, mode, opts = _resolve(color, mode, opts)
    if classify(value) is not Kind.RECORD:
        return _format(value, color, mode, opts)
    return _fmt_record(value, color, mode, opts)


def debug_repr(value: Any) -> str:
    """
    Canonical literal text of a value: repr() with broken __repr__ handled gracefully.

    Examples:
        >>> debug_repr("x")
        "'x'"
        >>> class Broken:
        ...     def __repr__(self):
        ...         raise ValueError
        >>> debug_repr(Broken())
        '<Broken object (repr failed: ValueError)>'
    """
    try:
        return repr(value)
    except RecursionError:
        raise
    except Exception as e:
        return f"<{class_name(value)} object (repr failed: {type(e).__name__})>"


def record_fields(value: Any) -> list[tuple[str, Any]]:
    """
    Return (name, value) pairs of a record in field declaration order.

    Supports named tuples, dataclass instances and types registered as Kind.RECORD,
    the latter exposing their public instance attributes. A declared field without a
    value is reported as `<missing>` with a RuntimeWarning.
    """
    if is_named_tuple(value):
        return list(zip(type(value)._fields, value))

    if dataclasses.is_dataclass(value):
        names = [f.name for f in dataclasses.fields(value)]
    elif hasattr(value, "__dict__"):
        names = [name for name in vars(value) if not name.startswith("_")]
    else:
        names = [name for name in _slot_names(type(value)) if not name.startswith("_")]

    fields = []
    for name in names:
        try:
            field_value = getattr(value, name)
        except AttributeError as e:
            warnings.warn(
                f"Failed to read field {name!r} of {class_name(value, fully_qualified=True)}: {e}",
                RuntimeWarning,
                stacklevel=2,
            )
            field_value = _MISSING
        fields.append((name, field_value))
    return fields


# Private Methods ------------------------------------------------------------------------------------------------------

def _format(value: Any, color: Color, mode: Mode, opts: PPOptions) -> str:
    kind = classify(value)
    if kind is Kind.SEQUENCE:
        return _fmt_sequence(value, color, mode, opts)
    if kind is Kind.MAPPING:
        return _fmt_mapping(value, color, mode, opts)
    if kind is Kind.RECORD:
        return _fmt_record(value, color, mode, opts)
    return _fmt_scalar(value, color, mode, opts)


def _fmt_scalar(value: Any, color: Color, mode: Mode, opts: PPOptions) -> str:
    repr_ = debug_repr(value)
    if mode is Mode.INLINE:
        return repr_
    return f"{repr_} ({wrap(class_name(value, opts.fully_qualified), color)})\n\n"


def _fmt_sequence(value: Any, color: Color, mode: Mode, opts: PPOptions, label: str | None = None) -> str:
    items = list(value)
    children = [_format(x, color, Mode.INLINE, opts) for x in items]

    if mode is Mode.INLINE:
        parts = [f"{wrap(f'[{i}]', color)} {child}" for i, child in enumerate(children)]
        return "{" + ", ".join(parts) + "}"

    count = len(items)
    width = len(str(max(count - 1, 0)))
    label = sequence_label(value) if label is None else label
    elem_type = _type_name(common_class(items), opts)

    output = (f"{label} with {wrap(count, color)} elements of type "
              f"{wrap(elem_type, color)}:\n\n")
    for i, child in enumerate(children):
        output += f"{wrap(f'[{i:>{width}}]', color)} {child}\n"
    return output + "\n"


def _fmt_mapping(value: Any, color: Color, mode: Mode, opts: PPOptions) -> str:
    # Types registered as Kind.MAPPING only need items()
    entries = list(value.items())
    if opts.sort_keys:
        entries.sort(key=lambda kv: debug_repr(kv[0]))

    parts = [
        f"{wrap(f'[{debug_repr(k)}]', color)} {_format(v, color, Mode.INLINE, opts)}"
        for k, v in entries
    ]

    if mode is Mode.INLINE:
        return "{" + ", ".join(parts) + "}"

    # Empty mappings have no entry to infer types from, common_class() gives None
    key_type = _type_name(common_class(k for k, _ in entries), opts)
    value_type = _type_name(common_class(v for _, v in entries), opts)

    output = (f"Map: {wrap(len(entries), color)} elements, key type {wrap(key_type, color)}, "
              f"value type {wrap(value_type, color)}:\n\n")
    output += "".join(f"{part}\n" for part in parts)
    return output + "\n"


def _fmt_record(value: Any, color: Color, mode: Mode, opts: PPOptions) -> str:
    fields = record_fields(value)

    def field_text(v: Any) -> str:
        if opts.expand_records:
            return _format(v, color, Mode.INLINE, opts)
        return debug_repr(v)

    if mode is Mode.INLINE:
        parts = [f"{wrap(name, color)}: {field_text(v)}" for name, v in fields]
        return "{" + ", ".join(parts) + "}"

    name_width = max((len(name) for name, _ in fields), default=0)

    output = f"Record with {wrap(len(fields), color)} fields:\n\n"
    output += "{\n"
    for name, v in fields:
        output += f"  {wrap(name.ljust(name_width), color)}: {field_text(v)}\n"
    output += "}\n\n"
    return output


def _type_name(cls: type | None, opts: PPOptions) -> str:
    if cls is None:
        return opts.unknown_type
    return class_name(cls, opts.fully_qualified)


def _slot_names(cls: type) -> list[str]:
    names = []
    for base in reversed(cls.__mro__):
        slots = base.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(s for s in slots if s not in names and s not in ("__dict__", "__weakref__"))
    return names


def _resolve(color: Any, mode: Any, opts: Any) -> tuple[Color, Mode, PPOptions]:
    """Validate public arguments and normalize them to Color, Mode and PPOptions."""
    color = as_color(color)

    if isinstance(mode, str):
        try:
            mode = Mode(mode.strip().lower())
        except ValueError:
            raise ValueError(f"unknown mode {mode!r}, expected 'inline' or 'block'") from None
    if not isinstance(mode, Mode):
        raise TypeError(f"expected Mode, got <{class_name(mode)}>")

    if opts is None:
        opts = PPOptions()
    if not isinstance(opts, PPOptions):
        raise TypeError(f"expected PPOptions or None, got <{class_name(opts)}>")

    return color, mode, opts
