"""GNU assembler directives, each rendered as one line of assembly text."""

from __future__ import annotations

from enum import Enum

_I64_MIN, _I64_MAX = -(1 << 63), (1 << 63) - 1

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\0": "\\0",
}


class SymbolType(Enum):
    """ELF symbol types accepted by the .type directive."""

    FUNC = "function"
    OBJECT = "object"
    TLS = "tls_object"
    COMMON = "common"


def _line(text: str) -> str:
    return f"\t{text}\n"


def _quote(text: str) -> str:
    return '"' + "".join(_ESCAPES.get(ch, ch) for ch in text) + '"'


def _non_negative(value: int, what: str) -> int:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")
    return value


def source_file(path: str) -> str:
    """Start a new logical source file."""
    return _line(f".file {_quote(path)}")


def arch(cpu_type: str) -> str:
    """Select the processor architecture to assemble for."""
    return _line(f".arch {cpu_type}")


def ident(comment: str) -> str:
    """Place a comment tag in the object file."""
    return _line(f".ident {_quote(comment)}")


def noexecstack() -> str:
    """Mark the stack as not executable."""
    return _line('.section .note.GNU-stack,"",@progbits')


def globl(name: str) -> str:
    """Make ``name`` visible to the linker."""
    return _line(f".globl {name}")


def data() -> str:
    return _line(".data")


def bss() -> str:
    return _line(".bss")


def text() -> str:
    return _line(".text")


def balign(alignment: int) -> str:
    """Pad the location counter to a multiple of ``alignment`` bytes."""
    return _line(f".balign {_non_negative(alignment, 'alignment')}")


def size(name: str, size: int) -> str:
    """Record the size in bytes of the symbol ``name``."""
    return _line(f".size {name}, {_non_negative(size, 'size')}")


def size_label_relative(name: str) -> str:
    """Record the size of ``name`` as the distance from its label to here."""
    return _line(f".size {name}, .-{name}")


def symbol_type(name: str, kind: SymbolType) -> str:
    return _line(f".type {name}, @{kind.value}")


def quad(value: int) -> str:
    if not _I64_MIN <= value <= _I64_MAX:
        raise ValueError(f"{value} does not fit in a quad")
    return _line(f".quad {value}")


def byte(value: int) -> str:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{value} does not fit in a byte")
    return _line(f".byte {value}")


def zero(count: int) -> str:
    """Emit ``count`` zero bytes."""
    return _line(f".zero {_non_negative(count, 'count')}")


def string(text: str) -> str:
    """Emit a NUL terminated string."""
    return _line(f".string {_quote(text)}")


def label(name: str) -> str:
    return f"{name}:\n"