"""Types of the language and a table that keeps one instance of each."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto


class TypeKind(Enum):
    """The kinds of type the compiler knows about."""

    NIL = auto()
    BOOLEAN = auto()
    I64 = auto()
    TUPLE = auto()
    FUNCTION = auto()


_SCALAR_KINDS = frozenset({TypeKind.NIL, TypeKind.BOOLEAN, TypeKind.I64})


@dataclass(frozen=True)
class Type:
    """A type. Equality is structural; interned types can also be compared by identity.

    ``types`` holds the elements of a tuple or the arguments of a function;
    ``return_type`` is set for functions only.
    """

    kind: TypeKind
    types: tuple[Type, ...] = ()
    return_type: Type | None = None

    def __post_init__(self) -> None:
        if self.kind in _SCALAR_KINDS and (self.types or self.return_type is not None):
            raise ValueError(f"a {self.kind.name.lower()} type has no component types")
        if self.kind is TypeKind.TUPLE and self.return_type is not None:
            raise ValueError("a tuple type has no return type")
        if self.kind is TypeKind.FUNCTION and self.return_type is None:
            raise ValueError("a function type needs a return type")

    @property
    def element_types(self) -> tuple[Type, ...]:
        """The element types of a tuple type."""
        if self.kind is not TypeKind.TUPLE:
            raise TypeError(f"type [{emit_type(self)}] is not a tuple")
        return self.types

    @property
    def argument_types(self) -> tuple[Type, ...]:
        """The argument types of a function type."""
        if self.kind is not TypeKind.FUNCTION:
            raise TypeError(f"type [{emit_type(self)}] is not a function")
        return self.types

    def is_scalar(self) -> bool:
        """Whether values of this type fit in a single register."""
        return self.kind in _SCALAR_KINDS

    def __str__(self) -> str:
        return emit_type(self)


def emit_type(type_: Type) -> str:
    """Return the source spelling of ``type_``."""
    kind = type_.kind
    if kind is TypeKind.NIL:
        return "nil"
    if kind is TypeKind.BOOLEAN:
        return "bool"
    if kind is TypeKind.I64:
        return "i64"
    elements = ", ".join(emit_type(element) for element in type_.types)
    if kind is TypeKind.TUPLE:
        return f"({elements})"
    assert type_.return_type is not None
    return f"fn ({elements}) -> {emit_type(type_.return_type)}"


class TypeInterner:
    """Holds exactly one instance of every type that is asked for."""

    def __init__(self) -> None:
        self._nil = Type(TypeKind.NIL)
        self._boolean = Type(TypeKind.BOOLEAN)
        self._i64 = Type(TypeKind.I64)
        self._tuples: dict[tuple[Type, ...], Type] = {}
        self._functions: dict[tuple[Type, tuple[Type, ...]], Type] = {}

    def nil_type(self) -> Type:
        return self._nil

    def boolean_type(self) -> Type:
        return self._boolean

    def i64_type(self) -> Type:
        return self._i64

    def tuple_type(self, element_types: Iterable[Type]) -> Type:
        """Return the unique tuple type with the given element types."""
        key = tuple(element_types)
        found = self._tuples.get(key)
        if found is None:
            found = Type(TypeKind.TUPLE, key)
            self._tuples[key] = found
        return found

    def function_type(self, return_type: Type, argument_types: Iterable[Type]) -> Type:
        """Return the unique function type with the given signature."""
        arguments = tuple(argument_types)
        key = (return_type, arguments)
        found = self._functions.get(key)
        if found is None:
            found = Type(TypeKind.FUNCTION, arguments, return_type)
            self._functions[key] = found
        return found