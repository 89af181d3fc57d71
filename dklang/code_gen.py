"""Translation of dk bytecode to x86-64 NASM assembly."""

from __future__ import annotations

from itertools import zip_longest
from typing import Iterable, Iterator

from dklang.vm import OpCode

_HEADER = (
    '%include "backend/x86_64/std.S"',
    "section .text",
    "global _start",
    "_start:",
)

_BLOCKS = {
    OpCode.ADD: (";; --- ADD", "  pop rax", "  pop rbx", "  add rax, rbx", "  push rax"),
    OpCode.SUB: (";; --- SUB", "  pop rax", "  pop rbx", "  sub rax, rbx", "  push rax"),
    OpCode.MUL: (";; --- MUL", "  pop rax", "  pop rbx", "  mul rbx", "  push rax"),
    OpCode.DIV: (";; --- DIV", "  pop rbx", "  pop rax", "  div rbx", "  push rax"),
    OpCode.DUMP: (";; --- DUMP", "  pop rdi", "  call .sys_dump"),
    OpCode.EXIT: (";; --- EXIT", "  pop rdi", "  call .exit_with_value"),
}


def iter_assembly(bytecode: Iterable[int]) -> Iterator[str]:
    """Yield assembly lines for bytecode laid out four words per instruction."""
    yield from _HEADER
    words = iter(bytecode)
    for opcode, operand, _, _ in zip_longest(words, words, words, words, fillvalue=0):
        if opcode == OpCode.LOAD:
            yield f"  push {operand}"
        else:
            yield from _BLOCKS.get(opcode, ())


def generate_assembly(bytecode: Iterable[int]) -> str:
    """Return the whole assembly listing, one newline-terminated line each."""
    return "".join(f"{line}\n" for line in iter_assembly(bytecode))