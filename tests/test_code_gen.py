import pytest

from dklang.code_gen import generate_assembly, iter_assembly
from dklang.vm import OpCode

HEADER = [
    '%include "backend/x86_64/std.S"',
    "section .text",
    "global _start",
    "_start:",
]


def body(bytecode):
    return list(iter_assembly(bytecode))[len(HEADER):]


def test_header_always_emitted():
    assert list(iter_assembly([])) == HEADER


def test_nop_and_unknown_emit_nothing():
    assert body([0, 0, 0, 0, 0x42, 1, 2, 3]) == []


def test_load_pushes_operand():
    assert body([OpCode.LOAD, 5, 0, 0]) == ["  push 5"]


def test_negative_load():
    assert body([OpCode.LOAD, -3, 0, 0]) == ["  push -3"]


def test_add_block():
    assert body([OpCode.ADD, 0, 0, 0]) == [
        ";; --- ADD",
        "  pop rax",
        "  pop rbx",
        "  add rax, rbx",
        "  push rax",
    ]


def test_div_pops_divisor_first():
    assert body([OpCode.DIV, 0, 0, 0]) == [
        ";; --- DIV",
        "  pop rbx",
        "  pop rax",
        "  div rbx",
        "  push rax",
    ]


@pytest.mark.parametrize(
    "opcode, first, last",
    [
        (OpCode.SUB, ";; --- SUB", "  push rax"),
        (OpCode.MUL, ";; --- MUL", "  push rax"),
        (OpCode.DUMP, ";; --- DUMP", "  call .sys_dump"),
        (OpCode.EXIT, ";; --- EXIT", "  call .exit_with_value"),
    ],
)
def test_block_bounds(opcode, first, last):
    lines = body([opcode, 0, 0, 0])
    assert lines[0] == first
    assert lines[-1] == last


def test_partial_trailing_instruction():
    assert body([OpCode.LOAD, 7]) == ["  push 7"]


def test_program_order_is_kept():
    lines = body([OpCode.LOAD, 1, 0, 0, OpCode.LOAD, 2, 0, 0, OpCode.ADD, 0, 0, 0])
    assert lines[:3] == ["  push 1", "  push 2", ";; --- ADD"]


def test_generate_assembly_matches_lines():
    code = [OpCode.LOAD, 4, 0, 0, OpCode.DUMP, 0, 0, 0]
    text = generate_assembly(code)
    assert text.endswith("\n")
    assert text.splitlines() == list(iter_assembly(code))