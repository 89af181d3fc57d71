"""Bytecode virtual machine, x86-64 assembly generator, symbol table, token types and helpers for the dk language."""

__version__ = "0.1.0"
__all__ = ["vm", "code_gen", "symbol_table", "util", "tokens"]