"""
maybeargs parse results: the closed set of values one classification step produces.

Overview
- Flag(name):                    '--name' marker without a value.
- StringArgument(name, value):   '-name value' where value is not an integer.
- IntegerArgument(name, value):  '-name 42' (value lexed fully as base-10).
- ListArgument(name, values):    '-name a, b, c' (comma continuation).
- RawToken(value):               bare positional token.

The variants are structurally disjoint: callers dispatch on the concrete class
(isinstance or a match statement), never on a shared "kind" field. They are
immutable, compare by value, and are sealed against subclassing (see ModelType).

Representation
- str(result) is the short, user-facing form used in fault messages
  (e.g. "string 'name = value'").
- repr(result) / __rich_repr__ expose the fields for debugging and rich pretty printing.
"""
from .utils import *


def _check_name(cls, name):
    if not isinstance(name, str):
        raise TypeError(f"{cls.__typename__} 'name' must be a string")
    return name


class Result(metaclass=ModelType):
    """
    Abstract base of every parse result; not instantiable on its own.
    """
    __slots__ = ()

    def __new__(cls, *args, **kwargs):
        if cls is Result:
            raise TypeError("type 'Result' cannot be instantiated directly")
        return super().__new__(cls)

    def __fields__(self):
        return tuple(getattr(self, field) for field in type(self).__introspectable__)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.__fields__() == other.__fields__()

    def __hash__(self):
        return hash((type(self), self.__fields__()))


class Flag(Result, final=True):
    __slots__ = ("_name",)
    __introspectable__ = ("name",)

    def __init__(self, name, /):
        self._name = _check_name(type(self), name)

    def __str__(self):
        return f"flag '{self._name}'"


class StringArgument(Result, final=True):
    __slots__ = ("_name", "_value")
    __introspectable__ = ("name", "value")

    def __init__(self, name, value, /):
        self._name = _check_name(type(self), name)
        if not isinstance(value, str):
            raise TypeError(f"{type(self).__typename__} 'value' must be a string")
        self._value = value

    def __str__(self):
        return f"string '{self._name} = {self._value}'"


class IntegerArgument(Result, final=True):
    __slots__ = ("_name", "_value")
    __introspectable__ = ("name", "value")

    def __init__(self, name, value, /):
        self._name = _check_name(type(self), name)
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{type(self).__typename__} 'value' must be an integer")
        self._value = value

    def __str__(self):
        return f"int '{self._name} = {self._value}'"


class ListArgument(Result, final=True):
    """
    Named argument carrying an ordered sequence of string values.
    """
    __slots__ = ("_name", "_values")
    __introspectable__ = ("name", "values")

    def __init__(self, name, values, /):
        self._name = _check_name(type(self), name)
        if isinstance(values, str):
            raise TypeError(f"{type(self).__typename__} 'values' must be an iterable of strings")
        values = tuple(values)
        if not all(isinstance(value, str) for value in values):
            raise TypeError(f"{type(self).__typename__} 'values' must be an iterable of strings")
        self._values = values

    def __str__(self):
        return f"list '{self._name} = [{', '.join(self._values)}]'"


class RawToken(Result, final=True):
    __slots__ = ("_value",)
    __introspectable__ = ("value",)

    def __init__(self, value, /):
        if not isinstance(value, str):
            raise TypeError(f"{type(self).__typename__} 'value' must be a string")
        self._value = value

    def __str__(self):
        return f"'{self._value}'"


__all__ = (
    "Result",
    "Flag",
    "StringArgument",
    "IntegerArgument",
    "ListArgument",
    "RawToken",
)
