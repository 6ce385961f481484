"""Compiler building blocks: SSA IR, interned types, translation-unit context, assembler directives, graphs and path helpers."""

__version__ = "0.2.0"
__all__ = [
    "context",
    "directives",
    "graph",
    "ir",
    "paths",
    "typesys",
]