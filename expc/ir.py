"""The intermediate representation: operands, instructions, values and function bodies."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, IntEnum

from expc.typesys import Type

_U16_MAX = 0xFFFF
_U8_MAX = 0xFF
_I16_MIN, _I16_MAX = -(1 << 15), (1 << 15) - 1
_I64_MIN, _I64_MAX = -(1 << 63), (1 << 63) - 1


class OperandKind(IntEnum):
    """What an operand's value refers to."""

    SSA = 0x0
    CONSTANT = 0x1
    LABEL = 0x2
    IMMEDIATE = 0x3


@dataclass(frozen=True)
class Operand:
    """An instruction operand: a kind and a 16-bit payload."""

    kind: OperandKind
    value: int

    def __post_init__(self) -> None:
        if self.kind is OperandKind.IMMEDIATE:
            low, high = _I16_MIN, _I16_MAX
        else:
            low, high = 0, _U16_MAX
        if not low <= self.value <= high:
            raise ValueError(
                f"{self.kind.name.lower()} operand {self.value} is outside {low}..{high}"
            )


def ssa(index: int) -> Operand:
    """An operand naming the SSA local ``index``."""
    return Operand(OperandKind.SSA, index)


def constant(index: int) -> Operand:
    """An operand naming the constant at ``index``."""
    return Operand(OperandKind.CONSTANT, index)


def immediate(value: int) -> Operand:
    """An operand holding a signed 16-bit value directly."""
    return Operand(OperandKind.IMMEDIATE, value)


def label(index: int) -> Operand:
    """An operand naming the global label at ``index``."""
    return Operand(OperandKind.LABEL, index)


class Opcode(IntEnum):
    """Instruction opcodes.

    RETURN    B   -- return B
    CALL      ABC -- A = B(arguments in constant C)
    DOT       ABC -- A = B.C
    LOAD      AB  -- A = B
    NEGATE    AB  -- A = -B
    ADD .. MODULUS ABC -- A = B op C
    """

    RETURN = 0
    CALL = 1
    DOT = 2
    LOAD = 3
    NEGATE = 4
    ADD = 5
    SUBTRACT = 6
    MULTIPLY = 7
    DIVIDE = 8
    MODULUS = 9


@dataclass(frozen=True)
class Instruction:
    """One instruction with up to three operands."""

    opcode: Opcode
    a: Operand | None = None
    b: Operand | None = None
    c: Operand | None = None


class ValueKind(Enum):
    """The kinds of compile-time value."""

    UNINITIALIZED = 0
    NIL = 1
    BOOLEAN = 2
    I64 = 3
    TUPLE = 4


@dataclass(frozen=True)
class Value:
    """A compile-time value. ``data`` is a bool, an int or a tuple of operands."""

    kind: ValueKind = ValueKind.UNINITIALIZED
    data: bool | int | tuple[Operand, ...] | None = None


def nil_value() -> Value:
    return Value(ValueKind.NIL, False)


def boolean_value(flag: bool) -> Value:
    return Value(ValueKind.BOOLEAN, bool(flag))


def i64_value(number: int) -> Value:
    if not _I64_MIN <= number <= _I64_MAX:
        raise ValueError(f"{number} does not fit in a 64-bit signed integer")
    return Value(ValueKind.I64, number)


def tuple_value(elements: Iterable[Operand]) -> Value:
    items = tuple(elements)
    for item in items:
        if not isinstance(item, Operand):
            raise TypeError(f"tuple elements must be operands, not {type(item).__name__}")
    return Value(ValueKind.TUPLE, items)


@dataclass
class FormalArgument:
    """A declared argument of a function."""

    name: str
    type_: Type | None
    index: int
    ssa: int


@dataclass
class LocalVariable:
    """An SSA local; its type is filled in by the type checker when unknown."""

    name: str
    type_: Type | None
    ssa: int


@dataclass
class FunctionBody:
    """Arguments, locals and instructions of one function."""

    arguments: list[FormalArgument] = field(default_factory=list)
    local_variables: list[LocalVariable] = field(default_factory=list)
    return_type: Type | None = None
    ssa_count: int = 0
    block: list[Instruction] = field(default_factory=list)

    def new_argument(self, name: str, type_: Type | None) -> FormalArgument:
        """Declare the next argument, giving it its own SSA local."""
        index = len(self.arguments)
        if index > _U8_MAX:
            raise OverflowError("a function cannot take more than 256 arguments")
        slot = self.new_ssa().value
        local = self.new_local(name, slot)
        local.type_ = type_
        argument = FormalArgument(name, type_, index, slot)
        self.arguments.append(argument)
        return argument

    def argument(self, name: str) -> FormalArgument | None:
        """Return the argument called ``name``, or None."""
        return next((arg for arg in self.arguments if arg.name == name), None)

    def argument_at(self, index: int) -> FormalArgument:
        if not 0 <= index < len(self.arguments):
            raise IndexError(f"function has no argument {index}")
        return self.arguments[index]

    def new_ssa(self) -> Operand:
        """Reserve the next SSA local and return an operand naming it."""
        if self.ssa_count > _U16_MAX:
            raise OverflowError("too many SSA locals in one function")
        operand = ssa(self.ssa_count)
        self.ssa_count += 1
        return operand

    def new_local(self, name: str, ssa_index: int) -> LocalVariable:
        local = LocalVariable(name, None, ssa_index)
        self.local_variables.append(local)
        return local

    def local(self, name: str) -> LocalVariable | None:
        """Return the local called ``name``, or None."""
        return next((var for var in self.local_variables if var.name == name), None)

    def local_ssa(self, ssa_index: int) -> LocalVariable:
        """Return the local bound to SSA slot ``ssa_index``."""
        for var in self.local_variables:
            if var.ssa == ssa_index:
                return var
        raise KeyError(f"no local for ssa {ssa_index}")

    def append(self, instruction: Instruction) -> None:
        self.block.append(instruction)