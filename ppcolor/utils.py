"""
PPColor utilities shared across the package.

Type-name helpers used by the formatters to build headers.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any, Iterable


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Get the class name of an object or a class.

    Returns class name whether given an instance or the class itself.
    For example, both `class_name(10)` and `class_name(int)` return 'int'.
    Builtin classes are never module-qualified.

    Parameters:
        obj (Any): An object or a class.
        fully_qualified (bool): If true, returns the module-qualified name for user objects or classes.

    Returns:
        str: The class name.

    Examples:
        >>> class_name(10)
        'int'
        >>> class C: ...
        >>> class_name(C())
        'C'
        >>> class_name(C, fully_qualified=True)
        '__main__.C'
    """
    cls = obj if isinstance(obj, type) else type(obj)

    if fully_qualified and cls.__module__ != "builtins":
        return f"{cls.__module__}.{cls.__qualname__}"
    return cls.__name__


def common_class(items: Iterable[Any]) -> type | None:
    """
    Return the nearest class shared by all items, or None for an empty iterable.

    The MRO of the first item's type is walked and the first class every item is an
    instance of wins, so `[True, 1]` gives `int` and `[1, "a"]` gives `object`.

    Examples:
        >>> common_class([1, 2, 3])
        <class 'int'>
        >>> common_class([1, 2.5]) is object
        True
        >>> common_class([]) is None
        True
    """
    items = list(items)
    if not items:
        return None

    for cls in type(items[0]).__mro__:
        if all(isinstance(x, cls) for x in items[1:]):
            return cls
    return object
