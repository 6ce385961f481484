# expc

Building blocks for a compiler of a small, statically typed,
expression-oriented language. The package is pure Python and has no
third-party dependencies.

## Modules

- **`expc.ir`**: an SSA-style intermediate representation.
  - Operands are made with `ssa`, `constant`, `immediate` and `label`. Each
    one is an `Operand` with an `OperandKind` and a 16-bit payload.
    Immediates are signed; the other kinds are unsigned.
  - An `Instruction` has an `Opcode` (`RETURN`, `CALL`, `DOT`, `LOAD`,
    `NEGATE`, `ADD`, `SUBTRACT`, `MULTIPLY`, `DIVIDE`, `MODULUS`).
  - Compile-time values are made with `nil_value`, `boolean_value`,
    `i64_value` and `tuple_value`.
  - A `FunctionBody` holds `FormalArgument`s, `LocalVariable`s and a block
    of instructions.
- **`expc.typesys`**: `Type` and `TypeKind` (nil, bool, i64, tuples and
  functions). A `TypeInterner` hands out one shared instance per distinct
  type, and `emit_type` renders a type as text.
- **`expc.context`**: `Context` models one translation unit. It holds
  interned strings, labels, constants, a table of `Symbol`s and the function
  being built. Its `emit_*` methods append instructions to that function,
  and its `type_of_value`, `type_of_operand` and `type_of_function` methods
  work out types.
- **`expc.directives`**: functions that return GNU assembler directives as
  lines of text. Examples are `globl`, `size`, `symbol_type` (with
  `SymbolType`), `quad`, `byte`, `zero`, `string` and `label`.
- **`expc.graph`**: a directed `Graph` with `add_vertex`, `add_edge`,
  `fanout` and `fanin`.
- **`expc.paths`**: `replace_extension` and `erase`.

## Installation

```
pip install .
```

## Examples

Building a function in a context:

```python
from expc.context import Context
from expc.ir import Opcode, i64_value, immediate

context = Context("prog.exp")
main = context.symbol("main")
context.enter_function(main.function_body)
three = context.append_constant(i64_value(3))
total = context.emit_binary(Opcode.ADD, three, immediate(4))
context.emit_return(total)
context.leave_function()

print(context.type_of_operand(three))   # i64
print(len(main.function_body.block))    # 2
```

Interned types:

```python
from expc.typesys import TypeInterner, emit_type

types = TypeInterner()
pair = types.tuple_type([types.i64_type(), types.boolean_type()])
assert pair is types.tuple_type([types.i64_type(), types.boolean_type()])
print(emit_type(pair))                                           # (i64, bool)
print(emit_type(types.function_type(types.boolean_type(), [pair])))  # fn ((i64, bool)) -> bool
```

Assembler directives:

```python
from expc import directives

directives.globl("main")                                  # "\t.globl main\n"
directives.symbol_type("main", directives.SymbolType.FUNC)  # "\t.type main, @function\n"
```

Paths:

```python
from expc.paths import erase, replace_extension

replace_extension("/src/prog.exp", "s")   # "/src/prog.s"
replace_extension("/src/prog.exp", "")    # "/src/prog"
erase("hello world", 5, 6)                # "hello"
```

## What the package does not do

The package does not read or parse source text, so every program has to be
built through `Context` and `FunctionBody`. The context can report the type
of an operand, but the package has no pass that checks a whole function or
fills in the types of its locals and symbols. It has no error reporting for
user-facing diagnostics. It does not generate machine code. `expc.directives`
only formats directive lines, and nothing runs an assembler or a linker.
There is no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```