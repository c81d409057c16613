"""
Small helpers shared by the argument layers.

- Unset: "no value given" marker, distinct from None; falsey and final.
- coalesce(value, default): swap Unset for a default, keep every other value.
- rename(): give generated functions readable names in tracebacks and reprs.
- mirror(name): read-only property over self._<name>; containers are copied
  on the way out so callers never hold the live state.

    >>> coalesce(Unset, 80)
    80
    >>> coalesce(0, 80)
    0
"""
import builtins
import functools
from collections.abc import Sequence, Mapping, Set
from typing import final


@final
class UnsetType:
    """
    Type of the Unset marker; one instance per process.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    return default if object is Unset else object


def _apply_name(callable, name, /):
    if not builtins.callable(callable):
        raise TypeError("rename() target must be callable")
    if not isinstance(name, str):
        raise TypeError("rename() name must be a string")
    try:
        callable.__name__ = callable.__qualname__ = name
    except (AttributeError, TypeError):
        raise TypeError("rename() target does not accept a new name") from None
    return callable


def rename(*parameters):
    """
    rename(callable, name) renames in place and returns the callable;
    rename(name) returns a decorator doing the same.
    """
    match parameters:
        case (callable, name):
            return _apply_name(callable, name)
        case (name,):
            if not isinstance(name, str):
                raise TypeError("rename() name must be a string")

            def decorator(callable):
                return _apply_name(callable, name)

            return _apply_name(decorator, "rename")
        case _:
            raise TypeError("rename() takes 1 or 2 arguments (%d given)" % len(parameters))


def _copied(object):
    # tuples (namedtuples included) are immutable and pass through untouched
    if isinstance(object, Sequence) and not isinstance(object, (str, tuple)):
        return [_copied(item) for item in object]
    elif isinstance(object, Mapping):
        return {key: _copied(value) for key, value in object.items()}
    elif isinstance(object, Set):
        return {_copied(item) for item in object}
    return object


def mirror(name, /):
    """
    Read-only property exposing self._<name>.

        >>> class Holder:
        ...     items = mirror("items")
    """
    if not isinstance(name, str):
        raise TypeError("mirror() name must be a string")

    @rename(name)
    def getter(self):
        return _copied(getattr(self, "_" + name))

    return property(getter)


Unset = UnsetType()


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "mirror",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
