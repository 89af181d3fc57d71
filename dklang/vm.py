"""Accumulator-and-stack virtual machine that runs dk bytecode."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Iterable, Optional, TextIO

MEMORY_SIZE = 1024 * 1000
STACK_SIZE = 256
WORD_BYTES = 8
INSTRUCTION_WIDTH = 4

_INT64_MIN = -(1 << 63)
_UINT64_MASK = (1 << 64) - 1
_YELLOW = "\x1b[33m"
_RESET = "\x1b[0m"


class OpCode(IntEnum):
    """The instruction set. Every instruction is four words: opcode and three operands."""

    NOP = 0x0
    LOAD = 0x1
    ADD = 0x2
    DIV = 0x3
    MUL = 0x4
    SUB = 0x5
    JMP = 0x6
    CALL = 0x7
    JZ = 0x8
    JNZ = 0x9
    PUSH = 0xA
    POP = 0xB
    RET = 0xE
    LOADS = 0x10
    DEC = 0x19
    INC = 0x1A
    STORE = 0x1B
    EXIT = 0xFE
    DUMP = 0xFD
    HALT = 0xFF


class VMError(RuntimeError):
    """Raised when the machine cannot continue executing."""


class StackOverflowError(VMError):
    """Raised when an instruction pushes onto a full stack."""


class StackUnderflowError(VMError):
    """Raised when an instruction reads from an empty or out-of-range stack slot."""


def _wrap(value: int) -> int:
    """Reduce an integer to the signed 64-bit range."""
    return ((value - _INT64_MIN) & _UINT64_MASK) + _INT64_MIN


def _truncating_div(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


def inst_to_str(opcode: int) -> str:
    """Return the mnemonic of an opcode, or "UNKNOWN"."""
    try:
        return OpCode(opcode).name
    except ValueError:
        return "UNKNOWN"


class VM:
    """A machine with an accumulator, a word-addressed memory and a fixed stack."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out
        self.reset()

    def reset(self) -> None:
        """Clear registers, memory and stack."""
        self.pc = 0
        self.sp = 0
        self.acc = 0
        self.memory = [0] * MEMORY_SIZE
        self.stack = [0] * STACK_SIZE

    def _write(self, text: str) -> None:
        (self._out if self._out is not None else sys.stdout).write(text)

    def execute(self, code: Iterable[int]) -> None:
        """Load code at address 0 and run it until HALT or EXIT."""
        words = [_wrap(int(word)) for word in code]
        if len(words) > MEMORY_SIZE:
            raise ValueError(
                f"program of {len(words)} words does not fit in {MEMORY_SIZE} words of memory"
            )
        self.memory[: len(words)] = words

        while True:
            if self.pc < 0 or self.pc + INSTRUCTION_WIDTH > MEMORY_SIZE:
                raise VMError("program counter out of bounds")
            opcode, operand, _, _ = self.memory[self.pc : self.pc + INSTRUCTION_WIDTH]
            self.pc += INSTRUCTION_WIDTH
            if not self._step(opcode, operand):
                return

    def _step(self, opcode: int, operand: int) -> bool:
        """Execute one instruction; return False when the machine stops."""
        match opcode:
            case OpCode.LOAD:
                self.acc = operand
            case OpCode.PUSH:
                if self.sp >= STACK_SIZE:
                    raise StackOverflowError("PUSH: stack overflow")
                self.stack[self.sp] = self.acc
                self.sp += 1
            case OpCode.LOADS:
                if not 0 <= operand < STACK_SIZE:
                    raise StackUnderflowError("LOADS: stack slot out of range")
                self.acc = self.stack[operand]
            case OpCode.POP:
                if self.sp <= 0:
                    raise StackUnderflowError("POP: stack underflow")
                self.sp -= 1
                self.acc = self.stack[self.sp]
            case OpCode.ADD:
                if self.sp < 2:
                    raise StackUnderflowError("ADD: stack underflow")
                first = self.stack[self.sp - 1]
                second = self.stack[self.sp - 2]
                self.stack = [0] * STACK_SIZE
                self.sp = 0
                self.acc = _wrap(first + second)
            case OpCode.EXIT:
                self._write(f"EXIT: {self.acc}\n")
                return False
            case OpCode.DUMP:
                self._write(f"ACC: {self.acc}\n")
            case OpCode.STORE:
                if not 0 <= operand < MEMORY_SIZE:
                    raise VMError("invalid memory address for STORE")
                self.memory[operand] = self.acc
            case OpCode.SUB:
                self.acc = _wrap(self.acc - operand)
            case OpCode.MUL:
                self.acc = _wrap(self.acc * operand)
            case OpCode.DIV:
                if operand == 0:
                    raise VMError("DIV: division by zero")
                self.acc = _wrap(_truncating_div(self.acc, operand))
            case OpCode.JMP:
                self.pc = operand
            case OpCode.INC:
                self.acc = _wrap(self.acc + 1)
            case OpCode.DEC:
                self.acc = _wrap(self.acc - 1)
            case OpCode.JZ:
                if self.acc == 0:
                    self.pc = operand
            case OpCode.JNZ:
                if self.acc != 0:
                    self.pc = operand
            case OpCode.CALL:
                if self.sp >= STACK_SIZE:
                    raise StackOverflowError("CALL: stack overflow")
                self.stack[self.sp] = self.pc
                self.sp += 1
                self.pc = operand
            case OpCode.RET:
                if self.sp <= 0:
                    raise StackUnderflowError("RET: stack underflow")
                self.sp -= 1
                self.pc = self.stack[self.sp]
            case OpCode.HALT:
                return False
        return True

    def format_state(self, color: bool = False) -> str:
        """Describe the stack, the non-empty memory rows and the registers."""
        yellow, reset = (_YELLOW, _RESET) if color else ("", "")
        items = ", ".join(f"{yellow}{value}{reset}" for value in self.stack[: self.sp])
        parts = ["\nSTACK: \n\n", f" - [{items}]\n\n", "Memory:\n\n"]

        cells = iter(self.memory)
        rows = zip(cells, cells, cells, cells)
        for address, (op, first, second, third) in zip(
            range(0, MEMORY_SIZE, INSTRUCTION_WIDTH), rows
        ):
            if not (op or first or second or third):
                continue
            row = (
                f" - [0x{op & _UINT64_MASK:02x}\t{first}\t{second}\t{third}]"
                f"\t\t{inst_to_str(op)}\t\taddr\t0x{address:08x}\n"
            )
            if op in (OpCode.CALL, OpCode.RET):
                row = f"{yellow}{row}{reset}"
            parts.append(row)

        parts.append("\n")
        parts.append(f"[ACC {self.acc} | PC {self.pc} | SP {self.sp}]\n\n")
        parts.append(
            f"Memory Footprint: {self.pc * WORD_BYTES}/{4 * MEMORY_SIZE} Bytes\n\n"
        )
        return "".join(parts)

    def print_state(self) -> None:
        """Write the coloured state description to the output stream."""
        self._write(self.format_state(color=True))