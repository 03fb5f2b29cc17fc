r"""
maybeargs possibilities: patterns describing what the next token may look like.

Overview
- ArgumentKind: STRING | INTEGER | LIST, the value shape a named argument must have.
- Possibility: abstract descriptor with a match predicate and a rendered form.
  • ArgumentPossibility(long, short, kind, descr): a '-name value' argument of a kind.
  • FlagPossibility(name, descr): a '--name' flag.
  • RawPossibility(name, descr): a bare positional token.
- PossibilitySet: ordered descriptors gathered for one matching call.
- argument(...), flag(...), raw(...): factories with the default descriptions.

Matching rules
- Named possibilities compare the result's name with the declared name(s).
  Omitting every name turns the descriptor into a wildcard for its shape.
- ArgumentPossibility of kind STRING also accepts a RawToken, so
  expect(argument()) accepts bare positionals as well as '-x value' pairs.

Rendering (for fault messages only; never parsed back)
- argument: <--long:-short:String:descr>, <--long:Integer:descr>, <-short:List:descr>, <String:descr>
- flag:     <--name:descr>   (anonymous: <--*:descr>)
- raw:      <name:descr>     (anonymous: <*:descr>)

Quick example
    >>> from maybeargs.possibilities import argument, flag, raw, ArgumentKind
    >>> str(argument("output", "o", ArgumentKind.STRING, "where to write"))
    '<--output:-o:String:where to write>'
"""
from collections.abc import Iterable
from enum import Enum

from rich.text import Text

from .results import *
from .utils import *


class ArgumentKind(Enum):
    """
    value shape of a named argument.
    """
    STRING = "String"
    INTEGER = "Integer"
    LIST = "List"

    @property
    def result(self):
        """
        result class produced by the parser for this kind.
        """
        return {
            ArgumentKind.STRING: StringArgument,
            ArgumentKind.INTEGER: IntegerArgument,
            ArgumentKind.LIST: ListArgument,
        }[self]

    def __str__(self):
        return self.value


def _sanitize_name(cls, field, name):
    if not isinstance(name, str | Unset):
        raise TypeError(f"{cls.__typename__} '{field}' must be a string")
    if isinstance(name, str) and not (name := name.strip()):
        raise ValueError(f"{cls.__typename__} '{field}' cannot be empty")
    return name


def _sanitize_descr(cls, descr):
    if not isinstance(descr, str):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")
    if not (descr := descr.strip()):
        raise ValueError(f"{cls.__typename__} 'descr' cannot be empty")
    return descr


class Possibility(metaclass=ModelType):
    """
    Abstract pattern for the next parse result.

    Subclasses implement matches(result) and __str__; the base provides
    value equality and rich rendering.
    """
    __slots__ = ()

    def __new__(cls, *args, **kwargs):
        if cls is Possibility:
            raise TypeError("type 'Possibility' cannot be instantiated directly")
        return super().__new__(cls)

    def matches(self, result, /):
        raise NotImplementedError

    def __rich__(self):
        return Text(str(self), style="bold")

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return tuple(self.__rich_repr__()) == tuple(other.__rich_repr__())

    def __hash__(self):
        return hash((type(self), tuple(self.__rich_repr__())))


class ArgumentPossibility(Possibility, final=True):
    """
    Named, value-bearing argument of a given kind.

    Properties
    - long: str | Unset
    - short: str | Unset
    - kind: ArgumentKind
    - descr: str
    """
    __slots__ = ("_long", "_short", "_kind", "_descr")
    __introspectable__ = ("long", "short", "kind", "descr")

    def __init__(self, long=Unset, short=Unset, kind=ArgumentKind.STRING, descr="Arg"):
        cls = type(self)
        self._long = _sanitize_name(cls, "long", long)
        self._short = _sanitize_name(cls, "short", short)
        if not isinstance(kind, ArgumentKind):
            raise TypeError(f"{cls.__typename__} 'kind' must be an argument kind")
        self._kind = kind
        self._descr = _sanitize_descr(cls, descr)

    def matches(self, result, /):
        if isinstance(result, StringArgument | IntegerArgument | ListArgument):
            return isinstance(result, self._kind.result) and (
                (self._long is Unset and self._short is Unset)
                or result.name == self._long
                or result.name == self._short
            )
        # bare positionals satisfy a string-kind argument
        return self._kind is ArgumentKind.STRING and isinstance(result, RawToken)

    def __str__(self):
        names = []
        if self._long is not Unset:
            names.append(f"--{self._long}")
        if self._short is not Unset:
            names.append(f"-{self._short}")
        return "<%s>" % ":".join([*names, str(self._kind), self._descr])


class FlagPossibility(Possibility, final=True):
    __slots__ = ("_name", "_descr")
    __introspectable__ = ("name", "descr")

    def __init__(self, name=Unset, descr="Flag"):
        self._name = _sanitize_name(type(self), "name", name)
        self._descr = _sanitize_descr(type(self), descr)

    def matches(self, result, /):
        return isinstance(result, Flag) and (self._name is Unset or result.name == self._name)

    def __str__(self):
        return f"<--{coalesce(self._name, '*')}:{self._descr}>"


class RawPossibility(Possibility, final=True):
    __slots__ = ("_name", "_descr")
    __introspectable__ = ("name", "descr")

    def __init__(self, name=Unset, descr="Raw"):
        self._name = _sanitize_name(type(self), "name", name)
        self._descr = _sanitize_descr(type(self), descr)

    def matches(self, result, /):
        return isinstance(result, RawToken) and (self._name is Unset or result.value == self._name)

    def __str__(self):
        return f"<{coalesce(self._name, '*')}:{self._descr}>"


class PossibilitySet:
    """
    Ordered, read-only collection of possibilities for a single matching call.

    Raises
    - TypeError: when an item is not a Possibility.
    - ValueError: when the collection is empty.
    """
    __slots__ = ("_possibilities",)

    possibilities = mirror("possibilities")

    def __init__(self, possibilities, /):
        if not isinstance(possibilities, Iterable):
            raise TypeError("PossibilitySet() argument must be an iterable of possibilities")
        possibilities = tuple(possibilities)
        for possibility in possibilities:
            if not isinstance(possibility, Possibility):
                raise TypeError("PossibilitySet() items must be possibilities, not %s" % type(possibility).__name__)
        if not possibilities:
            raise ValueError("PossibilitySet() requires at least one possibility")
        self._possibilities = possibilities

    def match(self, result, /):
        """
        Return the first possibility matching `result`, or None.
        """
        if result is None:
            return None
        for possibility in self._possibilities:
            if possibility.matches(result):
                return possibility
        return None

    def has(self, result, /):
        return self.match(result) is not None

    def render(self):
        """
        Rendered possibilities, one per line.
        """
        return "\n".join(map(str, self._possibilities))

    def __iter__(self):
        return iter(self._possibilities)

    def __len__(self):
        return len(self._possibilities)

    def __repr__(self):
        return "PossibilitySet(%r)" % (self._possibilities,)


def argument(long=Unset, short=Unset, kind=ArgumentKind.STRING, descr="Arg"):
    """
    Build an ArgumentPossibility; omit both names for a kind-only wildcard.
    """
    return ArgumentPossibility(long, short, kind, descr)


def flag(name=Unset, descr="Flag"):
    """
    Build a FlagPossibility; omit the name to accept any flag.
    """
    return FlagPossibility(name, descr)


def raw(name=Unset, descr="Raw"):
    """
    Build a RawPossibility; omit the name to accept any bare token.
    """
    return RawPossibility(name, descr)


__all__ = (
    "ArgumentKind",
    "Possibility",
    "ArgumentPossibility",
    "FlagPossibility",
    "RawPossibility",
    "PossibilitySet",
    "argument",
    "flag",
    "raw",
)
