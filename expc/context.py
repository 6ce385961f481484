"""The translation unit being compiled: interned names, types, labels, constants and symbols."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from expc.ir import (
    FunctionBody,
    Instruction,
    LocalVariable,
    Opcode,
    Operand,
    OperandKind,
    Value,
    ValueKind,
    constant,
    label,
    tuple_value,
)
from expc.typesys import Type, TypeInterner

_U16_LIMIT = 1 << 16

_BINARY_OPCODES = frozenset(
    {Opcode.ADD, Opcode.SUBTRACT, Opcode.MULTIPLY, Opcode.DIVIDE, Opcode.MODULUS}
)


@dataclass
class Symbol:
    """A global definition; its type is unknown until it has been type checked."""

    name: str
    type_: Type | None = None
    function_body: FunctionBody = field(default_factory=FunctionBody)


class Context:
    """Everything known about one translation unit."""

    def __init__(self, source_path: str = "") -> None:
        self.source_path = source_path
        self.types = TypeInterner()
        self.symbol_table: dict[str, Symbol] = {}
        self._strings: dict[str, str] = {}
        self._labels: list[str] = []
        self._label_index: dict[str, int] = {}
        self._constants: list[Value] = []
        self._function: FunctionBody | None = None

    # names

    def intern(self, text: str) -> str:
        """Return the single stored copy of ``text``."""
        return self._strings.setdefault(text, text)

    # labels

    def insert_label(self, name: str) -> Operand:
        """Return a label operand for ``name``, adding the label if it is new."""
        name = self.intern(name)
        index = self._label_index.get(name)
        if index is None:
            index = len(self._labels)
            if index >= _U16_LIMIT:
                raise OverflowError("too many labels in one translation unit")
            self._labels.append(name)
            self._label_index[name] = index
        return label(index)

    def label_at(self, index: int) -> str:
        if not 0 <= index < len(self._labels):
            raise IndexError(f"no label at index {index}")
        return self._labels[index]

    # constants

    def append_constant(self, value: Value) -> Operand:
        """Store ``value`` and return a constant operand naming it."""
        index = len(self._constants)
        if index >= _U16_LIMIT:
            raise OverflowError("too many constants in one translation unit")
        self._constants.append(value)
        return constant(index)

    def constant_at(self, index: int) -> Value:
        if not 0 <= index < len(self._constants):
            raise IndexError(f"no constant at index {index}")
        return self._constants[index]

    # symbols

    def symbol(self, name: str) -> Symbol:
        """Return the symbol called ``name``, creating an empty one if needed."""
        name = self.intern(name)
        found = self.symbol_table.get(name)
        if found is None:
            found = Symbol(name)
            self.symbol_table[name] = found
        return found

    # the function being built or checked

    def enter_function(self, body: FunctionBody) -> None:
        self._function = body

    def leave_function(self) -> None:
        self._function = None

    def current_function(self) -> FunctionBody:
        if self._function is None:
            raise RuntimeError("not inside a function")
        return self._function

    def lookup_ssa(self, ssa_index: int) -> LocalVariable:
        """Return the local of the current function bound to ``ssa_index``."""
        return self.current_function().local_ssa(ssa_index)

    # types of things

    def type_of_value(self, value: Value) -> Type:
        kind = value.kind
        if kind is ValueKind.NIL:
            return self.types.nil_type()
        if kind is ValueKind.BOOLEAN:
            return self.types.boolean_type()
        if kind is ValueKind.I64:
            return self.types.i64_type()
        if kind is ValueKind.TUPLE:
            assert isinstance(value.data, tuple)
            elements = []
            for element in value.data:
                element_type = self.type_of_operand(element)
                if element_type is None:
                    raise ValueError("tuple element has no known type")
                elements.append(element_type)
            return self.types.tuple_type(elements)
        raise ValueError("an uninitialized value has no type")

    def type_of_function(self, body: FunctionBody) -> Type:
        if body.return_type is None:
            raise ValueError("function return type is not known")
        arguments = []
        for argument in body.arguments:
            if argument.type_ is None:
                raise ValueError(f"argument {argument.name!r} has no type")
            arguments.append(argument.type_)
        return self.types.function_type(body.return_type, arguments)

    def type_of_operand(self, operand: Operand) -> Type | None:
        """Return the type of ``operand``, or None where it is not known yet."""
        kind = operand.kind
        if kind is OperandKind.SSA:
            return self.lookup_ssa(operand.value).type_
        if kind is OperandKind.CONSTANT:
            return self.type_of_value(self.constant_at(operand.value))
        if kind is OperandKind.IMMEDIATE:
            return self.types.i64_type()
        return self.symbol(self.label_at(operand.value)).type_

    # instruction emission

    def _new_result(self) -> Operand:
        body = self.current_function()
        result = body.new_ssa()
        body.new_local("", result.value)
        return result

    def emit_return(self, operand: Operand) -> None:
        self.current_function().append(Instruction(Opcode.RETURN, b=operand))

    def emit_call(self, callee: Operand, arguments: Operand | Iterable[Operand]) -> Operand:
        """Emit a call; ``arguments`` is a tuple constant or the operands themselves."""
        if not isinstance(arguments, Operand):
            arguments = self.append_constant(tuple_value(arguments))
        if arguments.kind is not OperandKind.CONSTANT:
            raise ValueError("call arguments must be a constant tuple")
        result = self._new_result()
        self.current_function().append(Instruction(Opcode.CALL, result, callee, arguments))
        return result

    def emit_dot(self, source: Operand, index: Operand) -> Operand:
        result = self._new_result()
        self.current_function().append(Instruction(Opcode.DOT, result, source, index))
        return result

    def emit_load(self, source: Operand) -> Operand:
        result = self._new_result()
        self.current_function().append(Instruction(Opcode.LOAD, result, source))
        return result

    def emit_negate(self, source: Operand) -> Operand:
        result = self._new_result()
        self.current_function().append(Instruction(Opcode.NEGATE, result, source))
        return result

    def emit_binary(self, opcode: Opcode, left: Operand, right: Operand) -> Operand:
        """Emit an arithmetic instruction and return the operand holding its result."""
        if opcode not in _BINARY_OPCODES:
            raise ValueError(f"{opcode.name} is not a binary operation")
        result = self._new_result()
        self.current_function().append(Instruction(opcode, result, left, right))
        return result